"""Toggle error codes and exceptions.

Centralizes the failure kinds surfaced by the toggle container so callers
can match on either the exception class or its ``code``.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    INDEX_OUT_OF_BOUNDS = "INDEX_OUT_OF_BOUNDS"
    UNKNOWN_TOGGLE = "UNKNOWN_TOGGLE"
    FILE_READ_ERROR = "FILE_READ_ERROR"
    LINE_PARSE_WARNING = "LINE_PARSE_WARNING"  # Never escapes a load


class ToggleError(Exception):
    """Base toggle error."""

    code: Optional[ErrorCode] = None

    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ToggleIndexError(ToggleError, IndexError):
    """Raised when a toggle index is outside ``0..size-1``."""

    code = ErrorCode.INDEX_OUT_OF_BOUNDS

    def __init__(self, index: int, size: int, message: str = ""):
        self.index = index
        self.size = size
        super().__init__(message or f"Toggle index {index} out of range (size: {size})")


class UnknownToggleError(ToggleError, KeyError):
    """Raised when a name or variant does not belong to the toggle kind."""

    code = ErrorCode.UNKNOWN_TOGGLE

    def __init__(self, name: object, message: str = ""):
        self.name = name
        super().__init__(message or f"Unknown toggle: {name!r}")


class ToggleFileError(ToggleError, OSError):
    """Raised when a toggle state file cannot be read."""

    code = ErrorCode.FILE_READ_ERROR

    def __init__(self, path: str, reason: str = "", message: str = ""):
        self.path = path
        self.reason = reason
        super().__init__(message or f"Unable to read toggle file {path}: {reason}")


class LineParseError(ToggleError, ValueError):
    """Raised by the line parser for a malformed line."""

    code = ErrorCode.LINE_PARSE_WARNING

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"{reason}: {line!r}")


__all__ = [
    "ErrorCode",
    "ToggleError",
    "ToggleIndexError",
    "UnknownToggleError",
    "ToggleFileError",
    "LineParseError",
]
