"""
Path maintenance after a field is renamed.

A field's `path` is the dot-joined chain of its ancestors' names and its own.
When a name changes, the renamed field and every field below it get a new path.
"""

import logging
from typing import Dict, List, Mapping, Tuple

from ..models import NormalizedField


def update_fields_path_after_field_name_change(
    field: NormalizedField,
    by_id: Mapping[str, NormalizedField],
) -> Tuple[str, Dict[str, NormalizedField]]:
    """
    Recompute the path of a renamed field and of all its child fields or multi-fields.
    
    Args:
        field: The field whose name has changed (its `source["name"]` is the new name)
        by_id: Map of all the document fields; left untouched
        
    Returns:
        The new path of the field and an updated copy of `by_id`
    """
    updated_by_id: Dict[str, NormalizedField] = dict(by_id)
    paths = by_id[field.parent_id].path.split(".") if field.parent_id else []

    def update_field_path(_field: NormalizedField, _paths: List[str]) -> None:
        name = _field.name
        path = ".".join(_paths + [name])

        updated_by_id[_field.id] = _field.model_copy(update={"path": path})

        if _field.has_child_fields or _field.has_multi_fields:
            for child_id in _field.child_fields or []:
                update_field_path(by_id[child_id], _paths + [name])

    update_field_path(field, paths)

    return updated_by_id[field.id].path, updated_by_id


def rename_field(
    field_id: str,
    new_name: str,
    by_id: Mapping[str, NormalizedField],
) -> Tuple[str, Dict[str, NormalizedField]]:
    """
    Rename a field and re-derive the paths below it.
    
    Args:
        field_id: Id of the field to rename
        new_name: The new field name
        by_id: Map of all the document fields; left untouched
        
    Returns:
        The new path of the field and an updated copy of `by_id`
    """
    field = by_id[field_id]
    renamed = field.model_copy(update={"source": {**field.source, "name": new_name}})
    logging.debug(f"Renaming field {field.path} to {new_name}")
    return update_fields_path_after_field_name_change(renamed, by_id)
