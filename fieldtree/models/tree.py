"""
Outline models used to render the normalized table as a tree view.
"""

from typing import Any, List, Optional
from pydantic import BaseModel, Field


class TreeItem(BaseModel):
    """
    One node of a rendered outline.
    """
    
    label: Any = Field(
        ...,
        description="Whatever the render callback produced for the field"
    )
    
    children: Optional[List['TreeItem']] = Field(
        None,
        description="Nested items, None for fields without children"
    )


TreeItem.model_rebuild()
