"""Utility modules for dictanote."""

from dictanote.utils.exceptions import (
    AnalysisError,
    AnalysisFailedError,
    AuthError,
    BusyError,
    CaptureError,
    CaptureUnavailableError,
    ConfigurationError,
    DictanoteError,
    EmptyNoteError,
    InputTooLargeError,
    InvalidSpecPathError,
    LLMError,
    NotFoundError,
    RateLimitError,
    StorageQuotaError,
    StorageUnavailableError,
    StoreError,
    ValidationError,
)
from dictanote.utils.id_generator import generate_note_id, now_ms
from dictanote.utils.logger import get_logger, setup_logging

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # IDs and time
    "generate_note_id",
    "now_ms",
    # Exceptions
    "DictanoteError",
    "ValidationError",
    "EmptyNoteError",
    "InvalidSpecPathError",
    "InputTooLargeError",
    "NotFoundError",
    "BusyError",
    "ConfigurationError",
    "LLMError",
    "AnalysisError",
    "RateLimitError",
    "AuthError",
    "AnalysisFailedError",
    "StoreError",
    "StorageUnavailableError",
    "StorageQuotaError",
    "CaptureError",
    "CaptureUnavailableError",
]
