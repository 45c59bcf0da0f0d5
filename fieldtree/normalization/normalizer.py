"""
Normalization of nested mappings fields.

The mappings `properties` are recursive: an object field has `properties` of
its own, a text field has multi-fields under `fields`. To work with them as a
flat table, `normalize` walks the tree once, depth-first, and stores every
field under a generated id with explicit parent/child links. `denormalize`
rebuilds the nested shape from that table.

Example::

    # nested
    {"myObject": {"type": "object", "properties": {"name": {"type": "text"}}}}

    # normalized
    {
        "root_level_fields": ["id1"],
        "by_id": {
            "id1": {"source": {"name": "myObject", "type": "object"}, "path": "myObject",
                    "nested_depth": 0, "child_fields_name": "properties",
                    "can_have_child_fields": True, "has_child_fields": True,
                    "child_fields": ["id2"], ...},
            "id2": {"source": {"name": "name", "type": "text"}, "path": "myObject.name",
                    "parent_id": "id1", "nested_depth": 1, "child_fields_name": "fields",
                    "can_have_multi_fields": True, "has_multi_fields": False, ...},
        },
        "max_nested_depth": 1,
    }
"""

import copy
import logging
from typing import Any, Dict, List, Mapping, Optional

from ..definitions import TypeRegistry
from ..identifiers import IdGenerator, UuidIdGenerator
from ..models import NormalizedField, NormalizedFields
from .classifier import FieldClassifier


Fields = Dict[str, Dict[str, Any]]


class FieldNormalizer:
    """
    Converts between the nested mappings fields and the normalized table.
    """

    def __init__(
        self,
        type_registry: Optional[TypeRegistry] = None,
        id_generator: Optional[IdGenerator] = None,
    ):
        """
        Initialize the normalizer.
        
        Args:
            type_registry: Type definitions used to classify fields
            id_generator: Source of row identifiers (random UUIDs by default)
        """
        self.classifier = FieldClassifier(type_registry)
        self.id_generator = id_generator or UuidIdGenerator()

    def normalize(self, fields: Mapping[str, Mapping[str, Any]]) -> NormalizedFields:
        """
        Flatten the root-level `properties` into a NormalizedFields table.
        
        Args:
            fields: Mapping of field name to field declaration
            
        Returns:
            The table, the ordered root-level ids and the deepest level reached

        Raises:
            ValueError: If a declaration is not a mapping or carries a "name" key,
                which would be overwritten by the field name
        """
        by_id: Dict[str, NormalizedField] = {}
        root_level_fields: List[str] = []
        max_nested_depth = self._normalize_fields(fields, by_id, [], root_level_fields, 0)

        logging.debug(f"Normalized {len(by_id)} fields (max nested depth {max_nested_depth})")

        return NormalizedFields(
            by_id=by_id,
            root_level_fields=root_level_fields,
            max_nested_depth=max_nested_depth,
        )

    def _normalize_fields(
        self,
        props: Mapping[str, Mapping[str, Any]],
        to: Dict[str, NormalizedField],
        paths: List[str],
        ids: List[str],
        nested_depth: int,
        is_multi_field: bool = False,
        parent_id: Optional[str] = None,
    ) -> int:
        """Normalize one container level into `to`, appending ids to `ids`.

        Returns the deepest level reached at or below this one.
        """
        max_depth = nested_depth

        for prop_name, value in props.items():
            path = ".".join(paths + [prop_name])
            if not isinstance(value, Mapping):
                raise ValueError(f"Field '{path}' must be declared as a mapping, got {type(value).__name__}")
            # The row keeps the field name under "name", so a declared one cannot survive.
            if "name" in value:
                raise ValueError(f"Field '{path}' declares a reserved 'name' key")

            field_id = self.id_generator.generate_id()
            ids.append(field_id)

            field = {**value, "name": prop_name}
            meta = self.classifier.get_field_meta(field, is_multi_field)
            source = field

            if meta.has_child_fields or meta.has_multi_fields:
                # Only "properties" children sit one level deeper.
                next_depth = nested_depth + 1 if meta.can_have_child_fields else nested_depth
                meta.child_fields = []

                child_max = self._normalize_fields(
                    field[meta.child_fields_name],
                    to,
                    paths + [prop_name],
                    meta.child_fields,
                    next_depth,
                    meta.can_have_multi_fields,
                    field_id,
                )
                max_depth = max(max_depth, child_max)

                # The children now live in their own rows.
                source = {k: v for k, v in field.items() if k != meta.child_fields_name}

            to[field_id] = NormalizedField(
                id=field_id,
                parent_id=parent_id,
                nested_depth=nested_depth,
                is_multi_field=is_multi_field,
                path=path,
                source=copy.deepcopy(source),
                **meta.model_dump(),
            )

        return max_depth

    def denormalize(self, normalized: NormalizedFields) -> Fields:
        """
        Rebuild the nested fields from a table produced by `normalize`.
        
        Args:
            normalized: The normalized table
            
        Returns:
            Mapping of root-level field name to field declaration
        """
        fields = self._denormalize_ids(normalized.root_level_fields, normalized.by_id, {})
        logging.debug(f"Denormalized {len(normalized.by_id)} fields")
        return fields

    def _denormalize_ids(
        self,
        ids: List[str],
        by_id: Mapping[str, NormalizedField],
        to: Fields,
    ) -> Fields:
        for field_id in ids:
            normalized_field = by_id[field_id]
            field = copy.deepcopy(normalized_field.source)
            name = field.pop("name")
            to[name] = field

            if normalized_field.child_fields:
                field[normalized_field.child_fields_name] = self._denormalize_ids(
                    normalized_field.child_fields, by_id, {}
                )

        return to


def normalize(fields: Mapping[str, Mapping[str, Any]], id_generator: Optional[IdGenerator] = None) -> NormalizedFields:
    """Normalize with the default type registry."""
    return FieldNormalizer(id_generator=id_generator).normalize(fields)


def denormalize(normalized: NormalizedFields) -> Fields:
    """Denormalize with the default type registry."""
    return FieldNormalizer().denormalize(normalized)
