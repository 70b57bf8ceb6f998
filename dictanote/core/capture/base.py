"""
Speech capture device interface.

A capture device pushes fragments of recognized text through registered
callbacks. Interim fragments are best-effort guesses that the next
fragment supersedes; final fragments are confirmed text.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel

FragmentCallback = Callable[[str, bool], None]
ErrorCallback = Callable[[str], None]
StoppedCallback = Callable[[], None]


class CaptureAvailability(str, Enum):
    """Result of the startup capability probe."""

    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


class CaptureEventKind(str, Enum):
    FRAGMENT = "fragment"
    ERROR = "error"
    STOPPED = "stopped"


class CaptureEvent(BaseModel):
    """One notification from a capture device, queued in emission order."""

    kind: CaptureEventKind
    text: str = ""
    is_interim: bool = False
    reason: str | None = None


class CaptureDevice(ABC):
    """
    Abstract speech-to-text capture device.

    Implementations call the registered callbacks from whatever thread
    their recognizer runs on; consumers must not assume the event loop
    thread.
    """

    @abstractmethod
    def is_available(self) -> bool:
        """Whether speech capture works in this environment."""
        pass

    @abstractmethod
    def configure_language(self, code: str) -> None:
        """Set the recognition language (e.g. "en-US")."""
        pass

    @abstractmethod
    def start(self) -> None:
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop listening; pending results are still delivered."""
        pass

    @abstractmethod
    def abort(self) -> None:
        """Stop listening and discard pending results."""
        pass

    @abstractmethod
    def on_fragment(self, callback: FragmentCallback) -> None:
        """Register callback(text, is_interim)."""
        pass

    @abstractmethod
    def on_error(self, callback: ErrorCallback) -> None:
        """Register callback(reason)."""
        pass

    @abstractmethod
    def on_stopped(self, callback: StoppedCallback) -> None:
        """Register callback() fired when the device stops listening."""
        pass


def probe_capture(device: CaptureDevice | None) -> CaptureAvailability:
    """
    Probe speech capture once at startup.

    Args:
        device: Capture device, or None when the environment has none

    Returns:
        AVAILABLE if the device reports it can capture, else UNAVAILABLE
    """
    if device is None:
        return CaptureAvailability.UNAVAILABLE
    return CaptureAvailability.AVAILABLE if device.is_available() else CaptureAvailability.UNAVAILABLE
