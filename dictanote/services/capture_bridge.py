"""
Capture Bridge - feeds capture device events into the Session Tracker.

Device callbacks may fire on any thread. They only enqueue a CaptureEvent
on the event loop; events are applied to the session in emission order by
drain() or run().
"""

import asyncio

from dictanote.core.capture.base import (
    CaptureAvailability,
    CaptureDevice,
    CaptureEvent,
    CaptureEventKind,
    probe_capture,
)
from dictanote.services.session_tracker import SessionTracker
from dictanote.utils.exceptions import CaptureUnavailableError
from dictanote.utils.logger import get_logger

logger = get_logger(__name__)


class CaptureBridge:
    """Registers device callbacks and applies their events to a session."""

    def __init__(self, device: CaptureDevice | None, session: SessionTracker):
        """
        Args:
            device: Capture device, or None when the environment has none
            session: Session receiving fragments
        """
        self.device = device
        self.session = session
        self.availability = probe_capture(device)
        self.last_error: str | None = None

        self._queue: asyncio.Queue[CaptureEvent] = asyncio.Queue()
        self._loop: asyncio.AbstractEventLoop | None = None

        if self.device is not None:
            self.device.on_fragment(self._on_fragment)
            self.device.on_error(self._on_error)
            self.device.on_stopped(self._on_stopped)

    @property
    def is_available(self) -> bool:
        return self.availability == CaptureAvailability.AVAILABLE

    def attach(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Bind callbacks to an event loop (defaults to the running loop)."""
        self._loop = loop or asyncio.get_running_loop()

    async def start_recording(self, language: str) -> None:
        """
        Start the device and a fresh session.

        Args:
            language: Recognition language code

        Raises:
            CaptureUnavailableError: If speech capture is unavailable
        """
        if not self.is_available:
            raise CaptureUnavailableError("Speech capture is not available in this environment")

        if self._loop is None:
            self.attach()

        self.last_error = None
        self.device.configure_language(language)
        self.device.start()
        self.session.start()
        logger.info("Recording started", extra={"language": language})

    async def stop_recording(self) -> None:
        """Stop the device and the session; queued fragments are still applied."""
        if self.device is not None and self.is_available:
            self.device.stop()
        await self.drain()
        self.session.stop()
        logger.info("Recording stopped")

    async def drain(self) -> int:
        """
        Apply every queued event.

        Returns:
            Number of events applied
        """
        # Let call_soon_threadsafe deliveries land in the queue first
        await asyncio.sleep(0)

        applied = 0
        while not self._queue.empty():
            self._apply(self._queue.get_nowait())
            applied += 1
        return applied

    async def run(self) -> None:
        """Apply events as they arrive until cancelled."""
        while True:
            event = await self._queue.get()
            self._apply(event)

    def close(self) -> None:
        """Abort the device, discarding pending recognition."""
        if self.device is not None and self.is_available:
            self.device.abort()

    def _apply(self, event: CaptureEvent) -> None:
        if event.kind == CaptureEventKind.FRAGMENT:
            if event.is_interim:
                self.session.update_text(partial=event.text)
            else:
                self.session.update_text(final=event.text)
        elif event.kind == CaptureEventKind.ERROR:
            self.last_error = event.reason
            logger.warning("Speech capture error: {}", event.reason)
            if self.session.is_recording:
                self.session.stop()
        else:
            logger.debug("Capture device stopped")

    def _enqueue(self, event: CaptureEvent) -> None:
        if self._loop is None:
            self._queue.put_nowait(event)
        else:
            self._loop.call_soon_threadsafe(self._queue.put_nowait, event)

    def _on_fragment(self, text: str, is_interim: bool) -> None:
        self._enqueue(
            CaptureEvent(kind=CaptureEventKind.FRAGMENT, text=text, is_interim=is_interim)
        )

    def _on_error(self, reason: str) -> None:
        self._enqueue(CaptureEvent(kind=CaptureEventKind.ERROR, reason=reason))

    def _on_stopped(self) -> None:
        self._enqueue(CaptureEvent(kind=CaptureEventKind.STOPPED))
