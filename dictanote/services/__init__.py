"""
Services for dictanote.

- SessionTracker: in-progress recording session
- NoteStore: ordered notes and current language
- AnalysisOrchestrator: single-flight LLM analysis
- PersistenceGateway: best-effort mirroring of notes to storage
- CaptureBridge: capture device events -> session
- NoteWorkspace: composition root
"""

from dictanote.services.analysis_orchestrator import AnalysisOrchestrator, classify_error
from dictanote.services.capture_bridge import CaptureBridge
from dictanote.services.note_store import NoteStore
from dictanote.services.persistence import PersistenceGateway
from dictanote.services.session_tracker import SessionTracker
from dictanote.services.workspace import NoteWorkspace

__all__ = [
    "AnalysisOrchestrator",
    "CaptureBridge",
    "NoteStore",
    "NoteWorkspace",
    "PersistenceGateway",
    "SessionTracker",
    "classify_error",
]
