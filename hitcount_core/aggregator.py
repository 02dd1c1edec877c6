"""Aggregation of visit lines into per-day hit counters."""
from __future__ import annotations
import logging
from typing import Dict, Iterable

from .days import truncate_day
from .hit_counter import DailyHitCounter
from .line_parser import parse_line

logger = logging.getLogger(__name__)

AggregateState = Dict[int, DailyHitCounter]


def add_to_hit_counts(state: AggregateState, day: int, website: str) -> None:
    counter = state.get(day)
    if counter is None:
        counter = state[day] = DailyHitCounter()
    counter.add_hit(website)


def aggregate(lines: Iterable[str]) -> AggregateState:
    """Count hits per website per UTC day.

    The whole input is consumed before returning. The first malformed line
    raises and aborts the aggregation; nothing is skipped.
    """
    state: AggregateState = {}
    line_count = 0
    for line_number, line in enumerate(lines, start=1):
        event = parse_line(line, line_number)
        add_to_hit_counts(state, truncate_day(event.timestamp_millis), event.website)
        line_count = line_number
    logger.debug(
        f"Aggregated {line_count} lines into {len(state)} days "
        f"({sum(len(c) for c in state.values())} day/website pairs)"
    )
    return state
