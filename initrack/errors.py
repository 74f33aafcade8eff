"""Error taxonomy for the tracker. Every error reaches ``main`` and exits 1."""

from __future__ import annotations

from typing import Optional


class TrackerError(Exception):
    """Base exception; the message is shown to the user as-is."""


class UsageError(TrackerError):
    """Raised when the command line carries more than one roster argument."""


class RosterSourceError(TrackerError):
    """Raised when the roster file is missing or cannot be read."""


class RecordError(TrackerError):
    """Base for a single bad roster record."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class LineFormatError(RecordError):
    """Raised when a record does not split into exactly ``<Name>, <Initiative>``."""


class IntegerParseError(RecordError):
    """Raised when the initiative field is not a signed base-10 integer."""


class EmptyRosterError(TrackerError):
    """Raised when combat would start with nobody in it."""
