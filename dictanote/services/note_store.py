"""
Note Store - the ordered note collection and the current capture language.

Mutations are applied to memory synchronously, then mirrored to storage
through the persistence gateway. A failed save never fails the mutation.
"""

from dictanote.models.note import Language, Note, NoteAnalysis
from dictanote.models.state import PersistedState
from dictanote.services.persistence import PersistenceGateway
from dictanote.services.session_tracker import SessionTracker
from dictanote.utils.exceptions import EmptyNoteError
from dictanote.utils.id_generator import generate_note_id, now_ms
from dictanote.utils.logger import get_logger

logger = get_logger(__name__)


class NoteStore:
    """
    Owns the note sequence (newest first) and each note's analysis slot.

    Services hold note ids, never their own copies of a note: read with
    get(), write back by id.
    """

    def __init__(
        self,
        persistence: PersistenceGateway | None = None,
        default_language: Language = Language.EN_US,
    ):
        """
        Initialize Note Store.

        Args:
            persistence: Gateway to mirror state to; None keeps notes in memory only
            default_language: Capture language until set_language() is called
        """
        self.persistence = persistence
        self._notes: list[Note] = []
        self._language = Language(default_language)

    @property
    def notes(self) -> tuple[Note, ...]:
        return tuple(self._notes)

    @property
    def current_language(self) -> Language:
        return self._language

    def __len__(self) -> int:
        return len(self._notes)

    def get(self, note_id: str) -> Note | None:
        """
        Look up a note.

        Args:
            note_id: Note identifier

        Returns:
            Note or None if not found
        """
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    def snapshot(self) -> PersistedState:
        return PersistedState(notes=list(self._notes), current_language=self._language)

    def restore(self, state: PersistedState) -> None:
        """Replace contents with a loaded snapshot, without saving."""
        self._notes = list(state.notes)
        self._language = state.current_language
        logger.info(
            "Restored {} notes",
            len(self._notes),
            extra={"language": self._language.value},
        )

    async def create_from_session(self, session: SessionTracker) -> Note | None:
        """
        Create a note from the session's committed text.

        Empty or whitespace-only transcripts are a silent no-op.

        Args:
            session: Session to read (not reset)

        Returns:
            The new note, or None if nothing was committed
        """
        content = session.committed_text.strip()
        if not content:
            logger.debug("Nothing committed, no note created")
            return None

        return await self._add(content, self._language)

    async def create_from_text(self, text: str, language: Language | None = None) -> Note:
        """
        Create a note from pasted or uploaded text.

        Args:
            text: Note text (trimmed before storing)
            language: Language tag; defaults to the current language

        Returns:
            The new note

        Raises:
            EmptyNoteError: If the text is empty after trimming
        """
        content = (text or "").strip()
        if not content:
            raise EmptyNoteError("Note content cannot be empty")

        return await self._add(content, Language(language) if language else self._language)

    async def delete(self, note_id: str) -> bool:
        """
        Remove a note and its analysis.

        Returns:
            True if a note was removed; absent ids are a no-op
        """
        remaining = [note for note in self._notes if note.id != note_id]
        if len(remaining) == len(self._notes):
            return False

        self._notes = remaining
        logger.info("Note deleted: {}", note_id)
        await self._persist()
        return True

    async def set_analysis(self, note_id: str, analysis: NoteAnalysis) -> bool:
        """
        Attach an analysis, replacing any previous one.

        Returns:
            False if the note no longer exists
        """
        return await self._replace_analysis(note_id, analysis)

    async def clear_analysis(self, note_id: str) -> bool:
        """
        Remove a note's analysis.

        Returns:
            False if the note does not exist
        """
        return await self._replace_analysis(note_id, None)

    async def set_language(self, language: Language) -> None:
        """Change the language used for subsequently created notes."""
        self._language = Language(language)
        await self._persist()

    async def _add(self, content: str, language: Language) -> Note:
        note_id = generate_note_id()
        while self.get(note_id) is not None:
            note_id = generate_note_id()

        note = Note(id=note_id, content=content, created_at=now_ms(), language=language)
        self._notes.insert(0, note)

        logger.info(
            "Note created: {}",
            note.id,
            extra={"note_id": note.id, "words": note.word_count, "language": language.value},
        )
        await self._persist()
        return note

    async def _replace_analysis(self, note_id: str, analysis: NoteAnalysis | None) -> bool:
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                self._notes[index] = note.model_copy(update={"analysis": analysis})
                break
        else:
            logger.debug("Note not found for analysis update: {}", note_id)
            return False

        await self._persist()
        return True

    async def _persist(self) -> bool:
        if self.persistence is None:
            return True
        return await self.persistence.save(self.snapshot())
