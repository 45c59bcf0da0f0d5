"""Static type and parameter definitions."""

from .data_types import (
    DataTypeDefinition,
    TypeRegistry,
    type_registry,
    DEFAULT_DATA_TYPES,
    PROPERTIES,
    MULTI_FIELDS,
)
from .parameters import ParameterDefinition, ParameterRegistry, parameter_registry, get_field_config

__all__ = [
    "DataTypeDefinition",
    "TypeRegistry",
    "type_registry",
    "DEFAULT_DATA_TYPES",
    "PROPERTIES",
    "MULTI_FIELDS",
    "ParameterDefinition",
    "ParameterRegistry",
    "parameter_registry",
    "get_field_config",
]
