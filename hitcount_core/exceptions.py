"""Custom exceptions for Hit Count operations."""
from __future__ import annotations
from typing import Optional


class HitCountError(Exception):
    """Base exception for all Hit Count operations."""
    pass


class ArgumentError(HitCountError):
    """Raised when the command line does not name exactly one input file."""
    pass


class FileAccessError(HitCountError):
    """Raised when the input file is missing, unreadable or not valid text."""
    pass


class MalformedLineError(HitCountError):
    """Raised when a line does not split into exactly two '|'-separated fields."""

    def __init__(self, message: str, line: str, line_number: Optional[int] = None):
        self.line = line
        self.line_number = line_number
        where = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"{message}{where}. Offending line: {line}")


class MalformedTimestampError(MalformedLineError):
    """Raised when the timestamp field is not a valid epoch-millis integer."""
    pass
