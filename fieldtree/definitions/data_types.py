"""
Data type registry for fieldtree.

This module defines the static table of mapping data types: which main types
exist, which sub-types they group, and which container (if any) each type
keeps nested entries under. The registry is built once and never mutated, so
the classifier and the sub-type resolver can share it.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple


PROPERTIES = "properties"
MULTI_FIELDS = "fields"


@dataclass(frozen=True)
class DataTypeDefinition:
    """
    Definition of a main data type.
    """
    value: str
    label: str
    sub_types: Tuple[str, ...] = ()
    child_fields_name: Optional[str] = None

    @property
    def has_sub_types(self) -> bool:
        return len(self.sub_types) > 0


DEFAULT_DATA_TYPES: Tuple[DataTypeDefinition, ...] = (
    DataTypeDefinition("text", "Text", child_fields_name=MULTI_FIELDS),
    DataTypeDefinition("keyword", "Keyword", child_fields_name=MULTI_FIELDS),
    DataTypeDefinition(
        "numeric",
        "Numeric",
        sub_types=("long", "integer", "short", "byte", "double", "float", "half_float", "scaled_float"),
    ),
    DataTypeDefinition("date", "Date", sub_types=("date", "date_nanos")),
    DataTypeDefinition("binary", "Binary"),
    DataTypeDefinition("boolean", "Boolean"),
    DataTypeDefinition(
        "range",
        "Range",
        sub_types=("integer_range", "float_range", "long_range", "ip_range", "double_range", "date_range"),
    ),
    DataTypeDefinition("object", "Object", child_fields_name=PROPERTIES),
    DataTypeDefinition("nested", "Nested", child_fields_name=PROPERTIES),
    DataTypeDefinition("ip", "IP"),
    DataTypeDefinition("rank_feature", "Rank feature"),
    DataTypeDefinition("rank_features", "Rank features"),
    DataTypeDefinition("dense_vector", "Dense vector"),
    DataTypeDefinition("sparse_vector", "Sparse vector"),
)


class TypeRegistry:
    """
    Immutable lookup over a set of data type definitions.
    """
    
    def __init__(self, definitions: Optional[Iterable[DataTypeDefinition]] = None):
        """
        Initialize the registry.
        
        Args:
            definitions: Type definitions to register (defaults to DEFAULT_DATA_TYPES)
        """
        if definitions is None:
            definitions = DEFAULT_DATA_TYPES

        self._types: Dict[str, DataTypeDefinition] = {d.value: d for d in definitions}

        # subType -> mainType, e.g. {"long": "numeric", "integer": "numeric"}
        self._sub_type_to_type: Dict[str, str] = {}
        for definition in self._types.values():
            for sub_type in definition.sub_types:
                self._sub_type_to_type[sub_type] = definition.value

        logging.debug(
            f"Type registry built with {len(self._types)} types and {len(self._sub_type_to_type)} sub-types"
        )
    
    def get_definition(self, data_type: str) -> Optional[DataTypeDefinition]:
        """
        Get a main type definition by name.
        
        Args:
            data_type: The main type name
            
        Returns:
            The definition, or None if the type is not registered
        """
        return self._types.get(data_type)
    
    def list_types(self) -> List[str]:
        """
        Get all registered main type names, in registration order.
        """
        return list(self._types.keys())
    
    def child_fields_name(self, data_type: Optional[str]) -> Optional[str]:
        """
        Get the container name a type keeps nested entries under.

        Sub-types resolve through their main type. Unknown types have none.
        """
        if data_type is None:
            return None
        definition = self._types.get(data_type)
        if definition is None:
            main_type = self._sub_type_to_type.get(data_type)
            definition = self._types.get(main_type) if main_type else None
        return definition.child_fields_name if definition else None
    
    def is_sub_type(self, data_type: str) -> bool:
        return data_type in self._sub_type_to_type
    
    def get_main_type_from_sub_type(self, sub_type: str) -> Optional[str]:
        """
        Resolve a sub-type to its main type.
        
        Args:
            sub_type: A declared sub-type such as "long" or "date_range"
            
        Returns:
            The main type ("numeric", "range", ...), or None for an unlisted sub-type
        """
        return self._sub_type_to_type.get(sub_type)


# Global type registry instance
type_registry = TypeRegistry()
