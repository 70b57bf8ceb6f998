"""
Note Workspace - composition root for a dictation session.

Brings together:
- Session Tracker and Capture Bridge (live speech)
- Note Store and Persistence Gateway (notes + language preference)
- Analysis Orchestrator (LLM analysis)

One workspace is created by the presentation layer and passed to whatever
needs it; there is no module-level singleton.
"""

import asyncio
from pathlib import Path

from dictanote.config import Config
from dictanote.core.capture.base import CaptureDevice
from dictanote.core.factory import KeyValueStoreFactory, LLMFactory
from dictanote.core.kv_store.base import KeyValueStore
from dictanote.core.llm.base import LLMProvider
from dictanote.core.spec_reader.reader import SpecReader
from dictanote.models.note import AnalysisMode, Language, Note, NoteAnalysis
from dictanote.services.analysis_orchestrator import AnalysisOrchestrator
from dictanote.services.capture_bridge import CaptureBridge
from dictanote.services.note_store import NoteStore
from dictanote.services.persistence import PersistenceGateway
from dictanote.services.session_tracker import SessionTracker
from dictanote.utils.exceptions import StoreError, ValidationError
from dictanote.utils.logger import get_logger

logger = get_logger(__name__)


class NoteWorkspace:
    """
    Explicit application state owned by the presentation layer.

    Features:
    - Record speech into a session and commit it as a note
    - Import pasted text or uploaded .txt/.md files
    - Analyze notes (single-flight) with optional spec context
    - Mirror notes and language preference to local storage
    """

    def __init__(
        self,
        config: Config,
        llm: LLMProvider,
        kv_store: KeyValueStore,
        capture_device: CaptureDevice | None = None,
        spec_reader: SpecReader | None = None,
    ):
        """
        Initialize Note Workspace.

        Args:
            config: Configuration object
            llm: Completion service
            kv_store: Storage backend for persisted notes
            capture_device: Speech capture device, None if unavailable
            spec_reader: Spec reader; defaults to one rooted at config.specs.specs_dir
        """
        self.config = config
        self.llm = llm
        self.kv_store = kv_store

        self.session = SessionTracker()
        self.persistence = PersistenceGateway(
            kv_store,
            storage_key=config.storage.storage_key,
            default_language=config.default_language,
        )
        self.notes = NoteStore(
            persistence=self.persistence,
            default_language=config.default_language,
        )
        self.spec_reader = spec_reader or SpecReader(
            config.specs.specs_dir, file_name=config.specs.file_name
        )
        self.analysis = AnalysisOrchestrator(
            llm=llm,
            note_store=self.notes,
            spec_reader=self.spec_reader,
            max_words=config.analysis.max_words,
            max_tokens=config.llm.max_tokens,
            temperature=config.llm.temperature,
            prompt_version=config.analysis.prompt_version,
        )
        self.capture = CaptureBridge(capture_device, self.session)

    @classmethod
    def from_config(
        cls, config: Config, capture_device: CaptureDevice | None = None
    ) -> "NoteWorkspace":
        """
        Build a workspace with factory-created collaborators.

        Raises:
            ConfigurationError: If the LLM provider or storage backend is misconfigured
        """
        return cls(
            config=config,
            llm=LLMFactory.create(config.llm),
            kv_store=KeyValueStoreFactory.create(config.storage),
            capture_device=capture_device,
        )

    async def initialize(self) -> bool:
        """
        Open storage and restore persisted notes.

        Returns:
            True if storage is available; False means notes live in memory only
        """
        logger.info("Initializing workspace")

        try:
            await self.kv_store.initialize()
        except StoreError as e:
            logger.warning("Storage unavailable, notes will not persist: {}", e.message)
            return False

        self.notes.restore(await self.persistence.load())
        logger.info(
            "Workspace ready",
            extra={"notes": len(self.notes), "capture": self.capture.availability.value},
        )
        return True

    async def close(self) -> None:
        """Abort capture and release the LLM client and storage."""
        self.capture.close()
        await self.llm.close()
        await self.kv_store.close()

    # Recording

    async def start_recording(self) -> None:
        await self.capture.start_recording(self.notes.current_language.value)

    async def stop_recording(self) -> None:
        await self.capture.stop_recording()

    async def commit_session(self) -> Note | None:
        """Create a note from the current session transcript."""
        await self.capture.drain()
        return await self.notes.create_from_session(self.session)

    def clear_session(self) -> None:
        self.session.clear()

    # Notes

    async def set_language(self, language: Language) -> None:
        await self.notes.set_language(language)

    async def delete_note(self, note_id: str) -> bool:
        return await self.notes.delete(note_id)

    async def import_text(self, text: str, language: Language | None = None) -> Note:
        """
        Create a note from pasted text.

        Raises:
            ValidationError: If the trimmed text is shorter than imports.min_chars
        """
        content = (text or "").strip()
        min_chars = self.config.imports.min_chars
        if len(content) < min_chars:
            raise ValidationError(
                f"Please paste at least {min_chars} characters",
                context={"length": len(content)},
            )
        return await self.notes.create_from_text(content, language)

    async def import_file(self, path: str | Path, language: Language | None = None) -> Note:
        """
        Create a note from an uploaded .txt or .md file.

        Raises:
            ValidationError: If the file type, size or content length is not accepted
        """
        path = Path(path)
        imports = self.config.imports

        if path.suffix.lower() not in imports.allowed_extensions:
            raise ValidationError(
                f"Unsupported file type: {path.suffix or path.name}",
                context={"allowed": imports.allowed_extensions},
            )

        try:
            size = path.stat().st_size
            if size > imports.max_file_bytes:
                raise ValidationError(
                    f"File too large. Maximum size is {imports.max_file_bytes // 1024} KB.",
                    context={"size": size},
                )
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ValidationError(f"Failed to read file: {e}", context={"path": str(path)}) from e

        content = text.strip()
        if len(content) < imports.min_chars:
            raise ValidationError(
                f"File content is too short. Minimum {imports.min_chars} characters required.",
                context={"length": len(content)},
            )
        return await self.notes.create_from_text(content, language)

    # Analysis

    async def analyze(
        self,
        note_id: str,
        mode: AnalysisMode = AnalysisMode.TECHNICAL,
        spec_path: str | None = None,
    ) -> NoteAnalysis:
        return await self.analysis.analyze(note_id, mode=mode, spec_path=spec_path)

    async def clear_analysis(self, note_id: str) -> bool:
        return await self.notes.clear_analysis(note_id)
