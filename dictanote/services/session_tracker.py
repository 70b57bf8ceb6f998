"""
Session Tracker - owns the in-progress recording session.

Purely synchronous state. Only the capture callbacks and the user-facing
commit/clear actions mutate it.
"""

from dictanote.models.session import RecordingSession
from dictanote.utils.id_generator import now_ms
from dictanote.utils.logger import get_logger

logger = get_logger(__name__)


class SessionTracker:
    """Recording flag, committed transcript, partial fragment and timestamps."""

    def __init__(self):
        self._session = RecordingSession()

    @property
    def is_recording(self) -> bool:
        return self._session.is_recording

    @property
    def committed_text(self) -> str:
        return self._session.committed_text

    @property
    def partial_text(self) -> str:
        return self._session.partial_text

    def snapshot(self) -> RecordingSession:
        """Copy of the current session."""
        return self._session.model_copy()

    def start(self) -> None:
        """Begin a new session, discarding any previous transcript."""
        self._session = RecordingSession(is_recording=True, start_time=now_ms())
        logger.debug("Recording session started")

    def stop(self) -> None:
        """End the session; the transcript stays readable."""
        self._session.is_recording = False
        self._session.end_time = now_ms()
        logger.debug(
            "Recording session stopped",
            extra={"words": len(self._session.committed_text.split())},
        )

    def update_text(self, final: str = "", partial: str = "") -> None:
        """
        Apply one capture fragment.

        A non-empty final fragment is appended to the committed text
        (space-joined) and clears the partial text it supersedes. Otherwise
        the partial fragment replaces the partial text. Ignored while not
        recording.

        Args:
            final: Confirmed fragment
            partial: Interim fragment
        """
        if not self._session.is_recording:
            logger.debug("Ignoring fragment outside a recording session")
            return

        final = final.strip()
        if final:
            committed = self._session.committed_text
            self._session.committed_text = f"{committed} {final}" if committed else final
            self._session.partial_text = ""
        else:
            self._session.partial_text = partial

    def clear(self) -> None:
        """Empty both texts without touching the recording flag."""
        self._session.committed_text = ""
        self._session.partial_text = ""
