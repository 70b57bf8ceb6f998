"""
Data models for dictanote.

Core models:
- Note, NoteAnalysis: persisted notes and their attached analysis
- Language, AnalysisMode: enumerated capture languages and analysis modes
- RecordingSession: in-memory capture session
- SpecFile: optional specification context for analysis
- PersistedState, AnalysisState: persisted snapshot and orchestrator view
"""

from dictanote.models.note import LANGUAGES, AnalysisMode, Language, Note, NoteAnalysis
from dictanote.models.session import RecordingSession
from dictanote.models.spec_file import SpecFile
from dictanote.models.state import AnalysisState, PersistedState

__all__ = [
    "Note",
    "NoteAnalysis",
    "Language",
    "LANGUAGES",
    "AnalysisMode",
    "RecordingSession",
    "SpecFile",
    "PersistedState",
    "AnalysisState",
]
