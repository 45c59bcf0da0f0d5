"""Normalization of mappings fields and the operations on the normalized table."""

from .classifier import FieldClassifier, get_field_meta
from .normalizer import FieldNormalizer, Fields, normalize, denormalize
from .paths import update_fields_path_after_field_name_change, rename_field
from .traversal import get_all_child_fields, get_max_nested_depth, build_field_tree_from_ids
from .editor import should_delete_child_fields_after_type_change, can_use_mappings_editor, is_state_valid

__all__ = [
    "FieldClassifier",
    "get_field_meta",
    "FieldNormalizer",
    "Fields",
    "normalize",
    "denormalize",
    "update_fields_path_after_field_name_change",
    "rename_field",
    "get_all_child_fields",
    "get_max_nested_depth",
    "build_field_tree_from_ids",
    "should_delete_child_fields_after_type_change",
    "can_use_mappings_editor",
    "is_state_valid",
]
