"""Speech capture device abstraction."""

from dictanote.core.capture.base import (
    CaptureAvailability,
    CaptureDevice,
    CaptureEvent,
    CaptureEventKind,
    probe_capture,
)

__all__ = [
    "CaptureAvailability",
    "CaptureDevice",
    "CaptureEvent",
    "CaptureEventKind",
    "probe_capture",
]
