"""Data models for fieldtree."""

from .fields import FieldMeta, NormalizedField, NormalizedFields
from .tree import TreeItem
from .state import SectionState, MappingsState

__all__ = [
    "FieldMeta",
    "NormalizedField",
    "NormalizedFields",
    "TreeItem",
    "SectionState",
    "MappingsState"
]
