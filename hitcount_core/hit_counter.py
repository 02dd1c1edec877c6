"""Per-day hit counting with websites grouped by their current count.

Two coupled mappings are kept in sync on every hit:

- ``website -> count``
- ``count -> {websites holding that count}``

A hit moves one website from its old bucket to the next one up, so recording
a hit is O(1) amortized and reading the ranking only sorts the distinct
counts, never the individual hits.
"""
from __future__ import annotations
from typing import Dict, Iterator, Mapping, Set, Tuple


class DailyHitCounter:
    """Hit counts for the websites visited on a single day."""

    def __init__(self):
        self._counts: Dict[str, int] = {}
        self._buckets: Dict[int, Set[str]] = {}
        self._total = 0

    def add_hit(self, website: str) -> int:
        """Record one visit to ``website`` and return its new count."""
        old = self._counts.get(website, 0)
        new = old + 1
        if old:
            bucket = self._buckets[old]
            bucket.discard(website)
            if not bucket:
                del self._buckets[old]
        self._buckets.setdefault(new, set()).add(website)
        self._counts[website] = new
        self._total += 1
        return new

    def count_of(self, website: str) -> int:
        return self._counts.get(website, 0)

    @property
    def total_hits(self) -> int:
        return self._total

    def snapshot(self) -> Mapping[int, frozenset]:
        """Return the current count -> websites grouping (read-only copy)."""
        return {count: frozenset(sites) for count, sites in self._buckets.items()}

    def ranked(self) -> Iterator[Tuple[str, int]]:
        """Yield (website, count) pairs, highest count first.

        Websites sharing a count come out in no particular order.
        """
        for count in sorted(self._buckets, reverse=True):
            for website in self._buckets[count]:
                yield website, count

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, website: object) -> bool:
        return website in self._counts

    def __repr__(self) -> str:
        return f"DailyHitCounter(websites={len(self._counts)}, hits={self._total})"
