"""
Normalized field models for fieldtree.

This module defines the flat, identifier-keyed table that a nested mappings
definition is converted into, along with the per-row capability metadata.
"""

from typing import Any, Dict, List, Optional, Set
from pydantic import BaseModel, Field, model_validator


class FieldMeta(BaseModel):
    """
    Capability metadata derived from a field's type.

    Produced by the classifier; `child_fields` is filled in during traversal.
    """
    
    child_fields_name: Optional[str] = Field(
        None,
        description="Container key this type keeps nested entries under ('properties' or 'fields')"
    )
    
    can_have_child_fields: bool = Field(
        False,
        description="Whether the type nests child fields under 'properties'"
    )
    
    has_child_fields: bool = Field(
        False,
        description="Whether the field currently has at least one child field"
    )
    
    can_have_multi_fields: bool = Field(
        False,
        description="Whether the type carries alternate representations under 'fields'"
    )
    
    has_multi_fields: bool = Field(
        False,
        description="Whether the field currently has at least one multi-field"
    )
    
    child_fields: Optional[List[str]] = Field(
        None,
        description="Ordered ids of the child rows, set only when the field has children"
    )
    
    is_expanded: bool = Field(
        False,
        description="Display flag for the editor's outline"
    )


class NormalizedField(FieldMeta):
    """
    A single row of the normalized table.
    """
    
    id: str = Field(
        ...,
        description="Opaque unique identifier assigned at normalization time"
    )
    
    parent_id: Optional[str] = Field(
        None,
        description="Identifier of the containing field, None for root-level fields"
    )
    
    nested_depth: int = Field(
        0,
        ge=0,
        description="Nesting level, 0 at the root"
    )
    
    is_multi_field: bool = Field(
        False,
        description="True when the field lives in a multi-fields container"
    )
    
    path: str = Field(
        ...,
        description="Dot-joined names from the root down to this field"
    )
    
    source: Dict[str, Any] = Field(
        default_factory=dict,
        description="The field's own declaration, including its name, without normalized child containers"
    )

    @property
    def name(self) -> str:
        """The field name as currently declared in `source`."""
        return self.source.get("name", "")


class NormalizedFields(BaseModel):
    """
    The flat table: rows by id, ordered root-level ids and the deepest level seen.

    Structural invariants are asserted once, when the table is built.
    """
    
    by_id: Dict[str, NormalizedField] = Field(
        default_factory=dict,
        description="Every row keyed by its identifier"
    )
    
    root_level_fields: List[str] = Field(
        default_factory=list,
        description="Identifiers of root-level fields in declaration order"
    )
    
    max_nested_depth: int = Field(
        0,
        ge=0,
        description="Largest nested_depth observed when the table was built"
    )

    @model_validator(mode="after")
    def _check_structure(self) -> "NormalizedFields":
        by_id = self.by_id
        owner: Dict[str, Optional[str]] = {}

        for field_id in self.root_level_fields:
            if field_id not in by_id:
                raise ValueError(f"Root-level id '{field_id}' has no row")
            if by_id[field_id].parent_id is not None:
                raise ValueError(f"Root-level field '{field_id}' must not have a parent")
            if field_id in owner:
                raise ValueError(f"Field '{field_id}' is listed more than once")
            owner[field_id] = None

        for field_id, field in by_id.items():
            if field.id != field_id:
                raise ValueError(f"Row keyed '{field_id}' carries id '{field.id}'")
            for child_id in field.child_fields or []:
                if child_id not in by_id:
                    raise ValueError(f"Field '{field_id}' references unknown child '{child_id}'")
                if child_id in owner:
                    raise ValueError(f"Field '{child_id}' is listed more than once")
                if by_id[child_id].parent_id != field_id:
                    raise ValueError(f"Field '{child_id}' is listed under '{field_id}' but parented elsewhere")
                owner[child_id] = field_id

        for field_id, field in by_id.items():
            if field_id not in owner:
                raise ValueError(f"Field '{field_id}' is not reachable from the root")

            # Walk to the root; a revisit means the parent chain loops.
            seen: Set[str] = {field_id}
            current = field
            while current.parent_id is not None:
                if current.parent_id not in by_id:
                    raise ValueError(f"Field '{current.id}' references unknown parent '{current.parent_id}'")
                if current.parent_id in seen:
                    raise ValueError(f"Parent chain of '{field_id}' is cyclic")
                seen.add(current.parent_id)
                current = by_id[current.parent_id]

            expected = field.name
            if field.parent_id is not None:
                expected = f"{by_id[field.parent_id].path}.{field.name}"
            if field.path != expected:
                raise ValueError(f"Path '{field.path}' of '{field_id}' should be '{expected}'")

        return self
