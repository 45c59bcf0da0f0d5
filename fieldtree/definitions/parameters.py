"""
Parameter registry for fieldtree.

Each mapping parameter (store, boost, ...) carries the default configuration
of the input widget that edits it. The configuration is opaque here; it is
handed to the editor layer as is.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional


@dataclass(frozen=True)
class ParameterDefinition:
    """
    Widget configuration for a mapping parameter and, optionally, its sub-props.
    """
    name: str
    field_config: Optional[Dict[str, Any]] = None
    props: Dict[str, "ParameterDefinition"] = field(default_factory=dict)


DEFAULT_PARAMETERS = (
    ParameterDefinition("store", {"type": "toggle", "defaultValue": False}),
    ParameterDefinition("index", {"type": "toggle", "defaultValue": True}),
    ParameterDefinition("doc_values", {"type": "toggle", "defaultValue": True}),
    ParameterDefinition(
        "boost",
        {"type": "number", "label": "Boost level", "defaultValue": 1.0, "min": 1, "max": 20},
    ),
    ParameterDefinition("coerce", {"type": "toggle", "defaultValue": True}),
    ParameterDefinition("ignore_malformed", {"type": "toggle", "defaultValue": False}),
    ParameterDefinition("null_value", {"type": "text", "defaultValue": ""}),
    ParameterDefinition("analyzer", {"type": "select", "defaultValue": "standard"}),
    ParameterDefinition(
        "fielddata_frequency_filter",
        {"defaultValue": {"min": 0.01, "max": 1, "min_segment_size": 50}},
        props={
            "min": ParameterDefinition("min", {"type": "number", "defaultValue": 0.01}),
            "max": ParameterDefinition("max", {"type": "number", "defaultValue": 1}),
            "min_segment_size": ParameterDefinition(
                "min_segment_size", {"type": "number", "defaultValue": 50}
            ),
        },
    ),
)


class ParameterRegistry:
    """
    Registry of parameter definitions.
    """
    
    def __init__(self, definitions: Optional[Iterable[ParameterDefinition]] = None):
        if definitions is None:
            definitions = DEFAULT_PARAMETERS
        self._parameters: Dict[str, ParameterDefinition] = {d.name: d for d in definitions}
    
    def list_parameters(self) -> List[str]:
        return list(self._parameters.keys())
    
    def get_field_config(self, param: str, prop: Optional[str] = None) -> Dict[str, Any]:
        """
        Get the widget configuration of a parameter or of one of its props.
        
        Args:
            param: Parameter name
            prop: Optional sub-prop of the parameter
            
        Returns:
            A copy of the configuration, empty when none is declared
            
        Raises:
            ValueError: If the parameter, or the prop on it, is not declared
        """
        definition = self._parameters.get(param)
        if definition is None:
            logging.error(f"Unknown parameter requested: {param}")
            raise ValueError(f'No parameter definition found for "{param}"')

        if prop is not None:
            prop_definition = definition.props.get(prop)
            if prop_definition is None:
                logging.error(f"Unknown prop requested: {param}.{prop}")
                raise ValueError(f'No field config found for prop "{prop}" on param "{param}"')
            definition = prop_definition

        return copy.deepcopy(definition.field_config) if definition.field_config else {}


# Global parameter registry instance
parameter_registry = ParameterRegistry()


def get_field_config(param: str, prop: Optional[str] = None) -> Dict[str, Any]:
    """Look up a widget configuration in the global parameter registry."""
    return parameter_registry.get_field_config(param, prop)
