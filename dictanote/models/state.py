"""
Persisted and transient application state views.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from dictanote.models.note import Language, Note


class PersistedState(BaseModel):
    """
    The subset of state mirrored to storage: notes and language preference.

    Session state and the analysis flags are never part of it.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    notes: list[Note] = Field(default_factory=list, description="Newest first")
    current_language: Language = Language.EN_US


class AnalysisState(BaseModel):
    """Read-only snapshot of the analysis orchestrator."""

    is_analyzing: bool = False
    analyzing_note_id: str | None = None
    analysis_error: str | None = None
