"""
fieldtree: Normalization engine for index mappings fields.

Flattens nested mappings `properties` into an identifier-keyed table and
rebuilds them, keeping paths and depths consistent under edits.
"""

__version__ = "0.1.0"
__author__ = "fieldtree Project"

# Import main components
from .models import NormalizedField, NormalizedFields, FieldMeta, TreeItem, MappingsState, SectionState
from .identifiers import IdGenerator, UuidIdGenerator, SequentialIdGenerator, get_unique_id
from .definitions import TypeRegistry, ParameterRegistry, type_registry, parameter_registry, get_field_config
from .normalization import (
    FieldClassifier,
    FieldNormalizer,
    get_field_meta,
    normalize,
    denormalize,
    update_fields_path_after_field_name_change,
    rename_field,
    get_all_child_fields,
    get_max_nested_depth,
    build_field_tree_from_ids,
    should_delete_child_fields_after_type_change,
    can_use_mappings_editor,
    is_state_valid,
)

__all__ = [
    "NormalizedField",
    "NormalizedFields",
    "FieldMeta",
    "TreeItem",
    "MappingsState",
    "SectionState",
    "IdGenerator",
    "UuidIdGenerator",
    "SequentialIdGenerator",
    "get_unique_id",
    "TypeRegistry",
    "ParameterRegistry",
    "type_registry",
    "parameter_registry",
    "get_field_config",
    "FieldClassifier",
    "FieldNormalizer",
    "get_field_meta",
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
