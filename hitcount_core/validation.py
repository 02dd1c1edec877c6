"""Cross-check of aggregated hit counts against a DuckDB GROUP BY."""
from __future__ import annotations
import logging
from typing import Dict, Iterable, Optional

import duckdb

from .aggregator import AggregateState
from .config import DAY_IN_MILLIS, EventField
from .days import format_day
from .line_parser import parse_line

logger = logging.getLogger(__name__)

_TS = EventField.TIMESTAMP.value
_SITE = EventField.WEBSITE.value

# DuckDB's % keeps the dividend's sign; normalise so negative timestamps floor
_DAY_SQL = f"({_TS} - ((({_TS} % {DAY_IN_MILLIS}) + {DAY_IN_MILLIS}) % {DAY_IN_MILLIS}))"


def load_events(conn: duckdb.DuckDBPyConnection, lines: Iterable[str]) -> int:
    """Parse ``lines`` into an ``events`` table and return the row count."""
    conn.execute(f"CREATE OR REPLACE TABLE events ({_TS} BIGINT, {_SITE} VARCHAR)")
    rows = [tuple(parse_line(line, n)) for n, line in enumerate(lines, start=1)]
    if rows:
        columns = ", ".join(EventField.all_values())
        conn.executemany(f"INSERT INTO events ({columns}) VALUES (?, ?)", rows)
    return len(rows)


def buckets_consistent(state: AggregateState) -> bool:
    """Every website sits in exactly the bucket matching its count."""
    for counter in state.values():
        seen = 0
        for count, sites in counter.snapshot().items():
            if count <= 0 or not sites:
                return False
            for website in sites:
                if counter.count_of(website) != count:
                    return False
            seen += len(sites)
        if seen != len(counter):
            return False
    return True


def validate_hit_counts(lines: Iterable[str], state: AggregateState,
                        conn: Optional[duckdb.DuckDBPyConnection] = None) -> Dict:
    """Recount ``lines`` with SQL and compare against ``state``.

    Returns a JSON-serializable dict of checks.
    """
    own_conn = conn is None
    if own_conn:
        conn = duckdb.connect(':memory:')
    try:
        events = load_events(conn, lines)
        day_totals = dict(conn.execute(
            f"SELECT {_DAY_SQL} AS dt, count(*) FROM events GROUP BY 1"
        ).fetchall())
        site_counts = conn.execute(
            f"SELECT {_DAY_SQL} AS dt, {_SITE}, count(*) FROM events GROUP BY 1, 2"
        ).fetchall()
    finally:
        if own_conn:
            conn.close()

    mismatched = set(day_totals) ^ set(state)
    for day, total in day_totals.items():
        if day in state and state[day].total_hits != total:
            mismatched.add(day)
    pairs_per_day: Dict[int, int] = {}
    for day, website, cnt in site_counts:
        pairs_per_day[day] = pairs_per_day.get(day, 0) + 1
        if day not in state or state[day].count_of(website) != cnt:
            mismatched.add(day)
    for day, counter in state.items():
        if pairs_per_day.get(day, 0) != len(counter):
            mismatched.add(day)

    checks = {
        'events': events,
        'days': len(day_totals),
        'days_match': set(day_totals) == set(state),
        'totals_match': {d: c.total_hits for d, c in state.items()} == day_totals,
        'counts_match': not mismatched,
        'buckets_consistent': buckets_consistent(state),
        'mismatched_days': [format_day(d) for d in sorted(mismatched)],
    }
    logger.debug(f"validation checks: {checks}")
    return checks
