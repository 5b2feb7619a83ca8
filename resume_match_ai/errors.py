"""Error taxonomy for resume extraction, matching and recommendations."""

from typing import Optional


class ResumeMatchError(Exception):
    """Base class for all errors raised by this package."""


class ExtractionError(ResumeMatchError):
    """Document could not be turned into text (unsupported, unreadable or empty)."""

    def __init__(self, message: str, filename: Optional[str] = None) -> None:
        self.filename = filename
        if filename:
            message = f"{message} (file: {filename})"
        super().__init__(message)


class AIServiceError(ResumeMatchError):
    """Completion endpoint failed, timed out or returned unusable output. Always recovered."""


class ValidationError(ResumeMatchError):
    """A single profile field failed cleaning; the field is dropped, never fatal."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")


class InputError(ResumeMatchError):
    """Resume text failed the length/content checks required for recommendations."""
