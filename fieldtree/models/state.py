"""
Editor state models.

Each section of the mappings editor tracks its own tri-state validity:
True, False, or None while it is still unknown.
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class SectionState(BaseModel):
    """
    Validity of one independently tracked part of the editor.
    """
    
    is_valid: Optional[bool] = Field(
        None,
        description="True/False once known, None while the section is still validating"
    )
    
    data: Any = Field(
        None,
        description="Section payload, opaque to the validity fold"
    )


class MappingsState(BaseModel):
    """
    The whole editor state. Sections that are not configured for the validity
    fold are carried along untouched.
    """

    model_config = ConfigDict(extra="allow")
    
    configuration: Optional[SectionState] = None
    fields_json_editor: Optional[SectionState] = None
    field_form: Optional[SectionState] = None
    document_fields: Optional[Any] = None
