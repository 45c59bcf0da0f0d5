"""
Policies the mappings editor consults before acting on the normalized table.
"""

import collections.abc
import logging
from typing import Any, Iterable, Mapping, Optional, Union

from ..config import config
from ..definitions import TypeRegistry, type_registry as default_type_registry
from ..models import MappingsState


def should_delete_child_fields_after_type_change(
    old_type: str,
    new_type: str,
    type_registry: Optional[TypeRegistry] = None,
) -> bool:
    """
    Decide whether changing a field's type drops its child fields.

    In most cases children go, including when the type is set to itself again.
    The exceptions are changes to a different type that keeps children under
    the same container: "text" <-> "keyword" ("fields") and
    "object" <-> "nested" ("properties").
    """
    registry = type_registry or default_type_registry
    old_container = registry.child_fields_name(old_type)
    if old_container is None:
        return False
    if new_type == old_type:
        return True
    return registry.child_fields_name(new_type) != old_container


def can_use_mappings_editor(max_nested_depth: int, max_depth: Optional[int] = None) -> bool:
    """
    Whether the form editor can display mappings nested this deep.
    
    Args:
        max_nested_depth: Deepest level found in the mappings
        max_depth: Ceiling to compare against (defaults to `editor.max_nested_depth`)
    """
    ceiling = config.max_nested_depth if max_depth is None else max_depth
    return max_nested_depth < ceiling


def _section_validity(section: Any) -> Optional[bool]:
    if isinstance(section, collections.abc.Mapping):
        return section.get("is_valid")
    return getattr(section, "is_valid", None)


def is_state_valid(
    state: Union[MappingsState, Mapping[str, Any]],
    sections: Optional[Iterable[str]] = None,
) -> Optional[bool]:
    """
    Fold the validity of the tracked state sections into one tri-state value.

    Absent sections are skipped. If any present section is still undetermined
    (None) the result is None, otherwise it is the AND of all of them.
    
    Args:
        state: A MappingsState or a mapping of section name to section state
        sections: Section names that count (defaults to `validity.sections`)
    """
    if sections is None:
        sections = config.validity_sections
    sections = list(sections)
    if isinstance(state, MappingsState):
        state = {name: getattr(state, name, None) for name in sections}

    is_valid: Optional[bool] = True
    for name in sections:
        section = state.get(name)
        if section is None:
            continue

        value = _section_validity(section)
        # If one section is still undetermined, so is the whole state.
        if is_valid is None or value is None:
            is_valid = None
            continue

        is_valid = is_valid and value

    logging.debug(f"Mappings state validity: {is_valid}")
    return is_valid
