"""
Specification document supplied as optional analysis context.
"""

from pydantic import BaseModel, Field


class SpecFile(BaseModel):
    """
    Spec file metadata and content.

    `exists=False` switches analysis to the non-context-aware prompt.
    """

    path: str = Field(..., description="Path relative to the specs directory")
    file_name: str = Field(default="spec.md")
    content: str = Field(default="")
    exists: bool = Field(default=False, description="True if the file was read")
    last_modified: int | None = Field(default=None, description="mtime (ms since epoch)")
