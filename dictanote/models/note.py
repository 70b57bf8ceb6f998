"""
Note and analysis models.

A Note is a persisted unit of captured or imported text. Its content is
immutable once created; the only field that changes over its lifetime is
the optional analysis slot, replaced by copying the note.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Language(str, Enum):
    """Capture languages supported by the speech capture device."""

    EN_US = "en-US"
    VI_VN = "vi-VN"


LANGUAGES: dict[Language, str] = {
    Language.EN_US: "English",
    Language.VI_VN: "Vietnamese",
}


class AnalysisMode(str, Enum):
    """How the completion service should read a note."""

    TECHNICAL = "technical"  # technical decisions, architectural changes
    ACTIONS = "actions"  # action items, owners, deadlines
    SUMMARY = "summary"  # comprehensive meeting summary


# Persisted records use camelCase keys (createdAt, analyzedAt, ...)
_RECORD_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)


class NoteAnalysis(BaseModel):
    """
    Completion service output attached to a note.

    Overwritten wholesale on re-analysis; no history is kept.
    """

    model_config = _RECORD_CONFIG

    content: str = Field(..., description="Markdown formatted analysis")
    analyzed_at: int = Field(..., description="Completion timestamp (ms since epoch)")
    mode: AnalysisMode = Field(..., description="Analysis mode used")
    version: int = Field(default=1, description="Prompt version, for migrating stored analyses")


class Note(BaseModel):
    """
    Captured or imported text plus optional analysis.

    Content is trimmed and must not be empty.
    """

    model_config = _RECORD_CONFIG

    id: str = Field(..., description="Unique note ID (note_xxx)")
    content: str = Field(..., description="Trimmed note text")
    created_at: int = Field(..., description="Creation timestamp (ms since epoch)")
    language: Language = Field(..., description="Capture language at creation/import")
    analysis: NoteAnalysis | None = Field(default=None, description="Attached analysis result")

    @field_validator("content")
    @classmethod
    def _content_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Note content cannot be empty")
        return value

    @property
    def word_count(self) -> int:
        return len(self.content.split())

    def has_analysis(self) -> bool:
        """
        Check if an analysis is attached.

        Returns:
            True if the analysis slot is filled
        """
        return self.analysis is not None
