"""
Analysis Orchestrator - single-flight LLM analysis of one note at a time.

States: idle -> running(note_id) -> idle. Only one analysis may be in
flight per process; a second request fails fast with BusyError instead of
queueing. Failures are classified, retained as the last error and
re-raised once the orchestrator is back to idle. There is no automatic
retry and no cancellation of an in-flight completion call.
"""

from dictanote.core.llm.base import LLMProvider
from dictanote.core.spec_reader.reader import SpecReader, validate_spec_path
from dictanote.models.note import AnalysisMode, NoteAnalysis
from dictanote.models.spec_file import SpecFile
from dictanote.models.state import AnalysisState
from dictanote.services.note_store import NoteStore
from dictanote.services.prompts import (
    PROMPT_VERSION,
    build_system_prompt,
    build_user_message,
    has_spec_context,
)
from dictanote.utils.exceptions import (
    AnalysisError,
    AnalysisFailedError,
    AuthError,
    BusyError,
    ConfigurationError,
    DictanoteError,
    InputTooLargeError,
    NotFoundError,
    RateLimitError,
)
from dictanote.utils.id_generator import now_ms
from dictanote.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_WORDS = 2000

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please wait and try again."
AUTH_MESSAGE = "Invalid API key. Please check your LLM credentials."


def classify_error(error: Exception) -> AnalysisError:
    """
    Map a completion failure to the analysis error taxonomy.

    429 -> RateLimitError, 401 or a missing credential -> AuthError,
    anything else -> AnalysisFailedError with the underlying message.

    Args:
        error: Exception raised while running the analysis

    Returns:
        Classified error (not raised)
    """
    if isinstance(error, AnalysisError):
        return error

    if isinstance(error, ConfigurationError):
        return AuthError(f"Missing LLM credential: {error.message}", context=error.context)

    status_code = getattr(error, "status_code", None)
    if status_code == 429:
        return RateLimitError(RATE_LIMIT_MESSAGE, context={"status_code": 429})
    if status_code == 401:
        return AuthError(AUTH_MESSAGE, context={"status_code": 401})

    message = error.message if isinstance(error, DictanoteError) else str(error)
    return AnalysisFailedError(message or "Analysis failed", context={"status_code": status_code})


class AnalysisOrchestrator:
    """
    Drives the asynchronous analysis workflow.

    Reads the note from the NoteStore before acting and writes the result
    back by id, so a note deleted mid-analysis is simply not resurrected.
    """

    def __init__(
        self,
        llm: LLMProvider,
        note_store: NoteStore,
        spec_reader: SpecReader | None = None,
        max_words: int = DEFAULT_MAX_WORDS,
        max_tokens: int = 4000,
        temperature: float = 0.3,
        prompt_version: int = PROMPT_VERSION,
    ):
        """
        Initialize Analysis Orchestrator.

        Args:
            llm: Completion service
            note_store: Owner of notes and their analysis slots
            spec_reader: Spec document reader; None disables spec context
            max_words: Word ceiling for analyzed notes
            max_tokens: Completion token limit
            temperature: Completion sampling temperature
            prompt_version: Version tag stored on each analysis
        """
        self.llm = llm
        self.note_store = note_store
        self.spec_reader = spec_reader
        self.max_words = max_words
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.prompt_version = prompt_version

        self._analyzing_note_id: str | None = None
        self._last_error: str | None = None

    @property
    def is_analyzing(self) -> bool:
        return self._analyzing_note_id is not None

    @property
    def analyzing_note_id(self) -> str | None:
        return self._analyzing_note_id

    @property
    def analysis_error(self) -> str | None:
        return self._last_error

    @property
    def state(self) -> AnalysisState:
        return AnalysisState(
            is_analyzing=self.is_analyzing,
            analyzing_note_id=self._analyzing_note_id,
            analysis_error=self._last_error,
        )

    def clear_error(self) -> None:
        self._last_error = None

    async def analyze(
        self,
        note_id: str,
        mode: AnalysisMode = AnalysisMode.TECHNICAL,
        spec_path: str | None = None,
    ) -> NoteAnalysis:
        """
        Analyze a note and attach the result to it.

        Args:
            note_id: Note to analyze
            mode: Analysis mode
            spec_path: Optional spec folder for context-aware analysis

        Returns:
            The attached analysis

        Raises:
            NotFoundError: If the note does not exist
            BusyError: If another analysis is in flight
            InvalidSpecPathError: If spec_path is unsafe
            InputTooLargeError: If the note exceeds max_words
            RateLimitError: If the completion service rate limits
            AuthError: If the credential is missing or rejected
            AnalysisFailedError: For any other completion failure
        """
        # Everything up to _begin() runs without awaiting: the busy check and
        # the transition to running happen in one step of the event loop.
        note = self.note_store.get(note_id)
        if note is None:
            raise NotFoundError("Note not found", context={"note_id": note_id})

        if self.is_analyzing:
            raise BusyError(
                "An analysis is already in progress",
                context={"note_id": note_id, "analyzing_note_id": self._analyzing_note_id},
            )

        mode = AnalysisMode(mode)
        if spec_path is not None:
            validate_spec_path(spec_path)

        word_count = note.word_count
        if word_count > self.max_words:
            raise InputTooLargeError(
                f"Transcript too long ({word_count} words). Maximum {self.max_words} words.",
                context={"note_id": note_id, "words": word_count},
            )

        self._begin(note_id)

        try:
            spec_file = await self._resolve_spec(spec_path)

            logger.info(
                "Analyzing note {}",
                note_id,
                extra={
                    "note_id": note_id,
                    "mode": mode.value,
                    "spec_context": has_spec_context(spec_file),
                    "words": word_count,
                },
            )

            content = await self.llm.complete(
                build_system_prompt(mode, spec_file),
                build_user_message(note.content, spec_file),
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )

            analysis = NoteAnalysis(
                content=content,
                analyzed_at=now_ms(),
                mode=mode,
                version=self.prompt_version,
            )

            attached = await self.note_store.set_analysis(note_id, analysis)
            if not attached:
                logger.info("Note {} was deleted during analysis, result dropped", note_id)

            return analysis
        except Exception as e:
            error = classify_error(e)
            self._last_error = error.message
            logger.warning(
                "Analysis of {} failed ({}): {}", note_id, type(error).__name__, error.message
            )
            if error is e:
                raise
            raise error from e
        finally:
            self._analyzing_note_id = None

    def _begin(self, note_id: str) -> None:
        self._analyzing_note_id = note_id
        self._last_error = None

    async def _resolve_spec(self, spec_path: str | None) -> SpecFile | None:
        if spec_path is None:
            return None
        if self.spec_reader is None:
            logger.debug("No spec reader configured, analyzing without spec context")
            return None
        return await self.spec_reader.read_spec(spec_path)
