"""Configuration constants for Hit Count."""
from __future__ import annotations
from enum import Enum


class EventField(Enum):
    """Column names for the two fields of an input event."""
    TIMESTAMP = "timestamp_millis"
    WEBSITE = "website"

    @classmethod
    def all_values(cls) -> list[str]:
        return [field.value for field in cls]


# One event per line: <epoch-millis>|<website>
FIELD_SEPARATOR = '|'

DAY_IN_MILLIS = 1000 * 60 * 60 * 24

# Day headers are always rendered in UTC, e.g. "01/31/1970 GMT"
DATE_HEADER_FORMAT = '{month:02d}/{day:02d}/{year:04d} GMT'

# Printable range of the header calendar:
# 0001-01-01T00:00:00.000Z .. 9999-12-31T23:59:59.999Z
MIN_TIMESTAMP_MILLIS = -62_135_596_800_000
MAX_TIMESTAMP_MILLIS = 253_402_300_799_999

LOGGER_NAME = 'hitcount'
