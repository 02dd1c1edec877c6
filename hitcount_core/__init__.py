"""Hit Count core: per-day website visit counts from '<millis>|<website>' logs."""

from .aggregator import aggregate
from .days import truncate_day, format_day
from .hit_counter import DailyHitCounter
from .line_parser import Event, parse_line
from .pipeline import run_report
from .report import render, write_report
from .validation import validate_hit_counts

__all__ = [
    "aggregate",
    "truncate_day",
    "format_day",
    "DailyHitCounter",
    "Event",
    "parse_line",
    "run_report",
    "render",
    "write_report",
    "validate_hit_counts",
]
