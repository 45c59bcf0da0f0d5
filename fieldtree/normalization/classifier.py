"""
Field capability classifier.

Decides, from a field's type, whether it nests child fields or carries
multi-fields, and whether it currently has any.
"""

from typing import Any, Mapping, Optional

from ..definitions import TypeRegistry, type_registry as default_type_registry, PROPERTIES, MULTI_FIELDS
from ..models import FieldMeta


class FieldClassifier:
    """
    Derives FieldMeta from a field declaration using a type registry.
    """

    def __init__(self, type_registry: Optional[TypeRegistry] = None):
        self.type_registry = type_registry or default_type_registry

    def get_child_fields_name(self, data_type: Optional[str]) -> Optional[str]:
        return self.type_registry.child_fields_name(data_type)

    def get_field_meta(self, field: Mapping[str, Any], is_multi_field: bool = False) -> FieldMeta:
        """
        Classify a field declaration.
        
        Args:
            field: The field as declared in the mappings (type plus parameters)
            is_multi_field: Whether the field sits inside a multi-fields container
            
        Returns:
            FieldMeta with `child_fields` unset and `is_expanded` False
        """
        child_fields_name = self.get_child_fields_name(field.get("type"))

        # Multi-fields are leaves, whatever their type.
        can_have_child_fields = not is_multi_field and child_fields_name == PROPERTIES
        can_have_multi_fields = not is_multi_field and child_fields_name == MULTI_FIELDS

        has_entries = bool(child_fields_name) and bool(field.get(child_fields_name))

        return FieldMeta(
            child_fields_name=child_fields_name,
            can_have_child_fields=can_have_child_fields,
            has_child_fields=can_have_child_fields and has_entries,
            can_have_multi_fields=can_have_multi_fields,
            has_multi_fields=can_have_multi_fields and has_entries,
            is_expanded=False,
        )


_default_classifier = FieldClassifier()


def get_field_meta(field: Mapping[str, Any], is_multi_field: bool = False) -> FieldMeta:
    """Classify a field with the default type registry."""
    return _default_classifier.get_field_meta(field, is_multi_field)
