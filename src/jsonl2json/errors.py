"""Errors raised while transcoding JSON Lines into a JSON array."""

from __future__ import annotations

from pydantic import BaseModel


class TranscodeError(Exception):
    """Base error for a failed transcode run (I/O errors excluded)."""

    pass


class RecordError(TranscodeError):
    """A single input record could not be processed."""

    def __init__(self, line_number: int, reason: str):
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}")


class RecordParseError(RecordError):
    """Input line is not a valid JSON value."""

    pass


class RecordSerializationError(RecordError):
    """Parsed value could not be encoded back to JSON."""

    pass


class Error(BaseModel):
    """Error result rendered by the CLI."""

    message: str

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Error":
        if isinstance(exc, FileNotFoundError) and exc.filename:
            return cls(message=f"File not found: {exc.filename}")
        if isinstance(exc, PermissionError) and exc.filename:
            return cls(message=f"Permission denied: {exc.filename}")
        if isinstance(exc, RecordParseError):
            return cls(message=f"Invalid JSON on {exc}")
        if isinstance(exc, RecordSerializationError):
            return cls(message=f"Cannot serialize record on {exc}")
        return cls(message=str(exc) or exc.__class__.__name__)


__all__ = [
    "Error",
    "RecordError",
    "RecordParseError",
    "RecordSerializationError",
    "TranscodeError",
]
