"""Day truncation and day header formatting."""
from __future__ import annotations
from datetime import datetime, timedelta, timezone

from .config import DAY_IN_MILLIS, DATE_HEADER_FORMAT

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def truncate_day(timestamp_millis: int) -> int:
    """Drop the time-of-day part of an epoch-millis timestamp (UTC midnight)."""
    # Floor division, so pre-1970 timestamps land on the earlier day
    return (timestamp_millis // DAY_IN_MILLIS) * DAY_IN_MILLIS


def format_day(day: int) -> str:
    """Render a day key as 'MM/DD/YYYY GMT'."""
    moment = EPOCH + timedelta(milliseconds=day)
    return DATE_HEADER_FORMAT.format(month=moment.month, day=moment.day, year=moment.year)
