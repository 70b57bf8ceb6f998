"""Fixtures for service tests.

Every service is wired to an in-memory key-value store and the MockLLM
double from the top-level conftest.
"""

import pytest

from dictanote.core.spec_reader import SpecReader
from dictanote.services import (
    AnalysisOrchestrator,
    NoteStore,
    PersistenceGateway,
    SessionTracker,
)


@pytest.fixture
def persistence(kv_store) -> PersistenceGateway:
    return PersistenceGateway(kv_store)


@pytest.fixture
def note_store(persistence) -> NoteStore:
    return NoteStore(persistence=persistence)


@pytest.fixture
def session() -> SessionTracker:
    return SessionTracker()


@pytest.fixture
def specs_dir(tmp_path):
    """Create specs/001-voice-dictation/spec.md."""
    spec_dir = tmp_path / "specs" / "001-voice-dictation"
    spec_dir.mkdir(parents=True)
    (spec_dir / "spec.md").write_text("## 3.1 Database\nUse MySQL for sessions.\n")
    return tmp_path / "specs"


@pytest.fixture
def orchestrator(mock_llm, note_store, specs_dir) -> AnalysisOrchestrator:
    return AnalysisOrchestrator(
        llm=mock_llm,
        note_store=note_store,
        spec_reader=SpecReader(specs_dir),
    )
