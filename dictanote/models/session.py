"""
Recording session model.

Mutable, in-memory only: never persisted across restarts.
"""

from pydantic import BaseModel, Field


class RecordingSession(BaseModel):
    """In-progress capture session state."""

    is_recording: bool = False
    committed_text: str = Field(default="", description="Accumulated final fragments")
    partial_text: str = Field(default="", description="Latest interim fragment")
    start_time: int | None = Field(default=None, description="Start timestamp (ms)")
    end_time: int | None = Field(default=None, description="End timestamp (ms)")
