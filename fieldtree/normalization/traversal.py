"""
Read-only walks over the normalized table.
"""

from typing import Any, Callable, List, Mapping

from ..models import NormalizedField, TreeItem


def get_all_child_fields(
    field: NormalizedField,
    by_id: Mapping[str, NormalizedField],
) -> List[NormalizedField]:
    """
    Retrieve recursively all the children fields of a field, in pre-order.
    
    Args:
        field: The field to return the children from
        by_id: Map of all the document fields
    """
    def get_child_fields(_field: NormalizedField, to: List[NormalizedField]) -> List[NormalizedField]:
        if _field.has_child_fields or _field.has_multi_fields:
            for child_id in _field.child_fields or []:
                child_field = by_id[child_id]
                to.append(child_field)
                get_child_fields(child_field, to)
        return to

    return get_child_fields(field, [])


def get_max_nested_depth(by_id: Mapping[str, NormalizedField]) -> int:
    """
    Return the max nested depth of the document fields.
    """
    return max((field.nested_depth for field in by_id.values()), default=0)


def build_field_tree_from_ids(
    field_ids: List[str],
    by_id: Mapping[str, NormalizedField],
    render: Callable[[NormalizedField], Any],
) -> List[TreeItem]:
    """
    Create a nested list of fields and their possible children to render a tree view.
    """
    items = []
    for field_id in field_ids:
        field = by_id[field_id]
        children = (
            build_field_tree_from_ids(field.child_fields, by_id, render)
            if field.child_fields
            else None
        )
        items.append(TreeItem(label=render(field), children=children))
    return items
