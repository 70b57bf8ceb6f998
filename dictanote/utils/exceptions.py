"""
Custom exception hierarchy for dictanote.

Provides structured error types for better error handling and debugging.
All exceptions inherit from DictanoteError for easy catching.
"""


class DictanoteError(Exception):
    """
    Base exception for all dictanote errors.
    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, context: dict | None = None):
        """
        Initialize dictanote error.
        Args:
            message: Human-readable error message
            context: Optional context dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ValidationError(DictanoteError):
    """
    Validation errors.
    Raised when input validation fails, before any I/O or state change.
    """

    pass


class EmptyNoteError(ValidationError):
    """Note content is empty or whitespace-only."""

    pass


class InvalidSpecPathError(ValidationError):
    """Spec path contains traversal segments or an absolute prefix."""

    pass


class InputTooLargeError(ValidationError):
    """Note text exceeds the analysis word limit."""

    pass


class NotFoundError(DictanoteError):
    """
    Resource not found errors.
    Raised when a requested note doesn't exist.
    """

    pass


class BusyError(DictanoteError):
    """
    Concurrency errors.
    Raised when an analysis is requested while another one is in flight.
    """

    pass


class ConfigurationError(DictanoteError):
    """
    Configuration errors.
    Raised when configuration is invalid or missing required values.
    """

    pass


class LLMError(DictanoteError):
    """
    LLM operation errors.
    Raised when completion calls fail (API errors, timeouts, etc.).
    """

    def __init__(
        self, message: str, status_code: int | None = None, context: dict | None = None
    ):
        super().__init__(message, context)
        self.status_code = status_code


class AnalysisError(DictanoteError):
    """
    Base exception for classified analysis failures.
    Raised by the analysis orchestrator after it has returned to idle.
    """

    pass


class RateLimitError(AnalysisError):
    """Completion service is rate limiting requests."""

    pass


class AuthError(AnalysisError):
    """Completion service credential is missing or invalid."""

    pass


class AnalysisFailedError(AnalysisError):
    """Any other completion service failure."""

    pass


class StoreError(DictanoteError):
    """
    Base exception for key-value store operations.
    """

    pass


class StorageUnavailableError(StoreError):
    """Storage backend is disabled or cannot be opened."""

    pass


class StorageQuotaError(StoreError):
    """Storage backend quota exceeded."""

    pass


class CaptureError(DictanoteError):
    """
    Capture device errors.
    """

    pass


class CaptureUnavailableError(CaptureError):
    """No speech capture capability in this environment."""

    pass
