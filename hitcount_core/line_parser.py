"""Parsing of '<epoch-millis>|<website>' visit lines."""
from __future__ import annotations
import re
from typing import Iterator, NamedTuple, Optional, TextIO

from .config import FIELD_SEPARATOR, MIN_TIMESTAMP_MILLIS, MAX_TIMESTAMP_MILLIS
from .exceptions import MalformedLineError, MalformedTimestampError

# Optional sign followed by ASCII digits only; no whitespace or underscores
_TIMESTAMP_RE = re.compile(r'[+-]?[0-9]+')


class Event(NamedTuple):
    """One visit: when it happened and which website was hit."""
    timestamp_millis: int
    website: str


def parse_timestamp(raw: str, line: str, line_number: Optional[int] = None) -> int:
    if not _TIMESTAMP_RE.fullmatch(raw):
        raise MalformedTimestampError(
            f"Timestamp must be a base-10 integer of epoch milliseconds, got {raw!r}",
            line, line_number)
    # Past 19 significant digits the value overflows 64 bits; never hand it to int()
    digits = raw.lstrip("+-").lstrip("0")
    if len(digits) > 19:
        raise MalformedTimestampError(
            f"Timestamp is outside the supported range "
            f"[{MIN_TIMESTAMP_MILLIS}, {MAX_TIMESTAMP_MILLIS}]",
            line, line_number)
    value = int(digits or "0")
    if raw.startswith("-"):
        value = -value
    if not MIN_TIMESTAMP_MILLIS <= value <= MAX_TIMESTAMP_MILLIS:
        raise MalformedTimestampError(
            f"Timestamp {value} is outside the supported range "
            f"[{MIN_TIMESTAMP_MILLIS}, {MAX_TIMESTAMP_MILLIS}]",
            line, line_number)
    return value


def parse_line(line: str, line_number: Optional[int] = None) -> Event:
    """Parse one line into an Event.

    The line must contain exactly one '|' separator. The website part is kept
    verbatim: it is not stripped and may be empty.
    """
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) != 2:
        raise MalformedLineError(
            f"Each line in input file must have exactly one '{FIELD_SEPARATOR}' character",
            line, line_number)
    raw_ts, website = parts
    return Event(parse_timestamp(raw_ts, line, line_number), website)


def iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of a text stream without their line terminator."""
    for raw_line in stream:
        if raw_line.endswith('\n'):
            raw_line = raw_line[:-1]
        yield raw_line
