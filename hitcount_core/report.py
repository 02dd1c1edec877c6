"""Rendering of the per-day hit count report."""
from __future__ import annotations
from typing import Iterator, List, TextIO

from .aggregator import AggregateState
from .days import format_day


def iter_report_lines(state: AggregateState) -> Iterator[str]:
    """Yield report lines: a day header, then '<website> <count>' per website."""
    for day in sorted(state):
        yield format_day(day)
        for website, count in state[day].ranked():
            yield f"{website} {count}"


def render(state: AggregateState) -> List[str]:
    return list(iter_report_lines(state))


def write_report(state: AggregateState, stream: TextIO) -> int:
    """Write the report to ``stream`` and return the number of lines written."""
    written = 0
    for line in iter_report_lines(state):
        stream.write(line + '\n')
        written += 1
    return written
