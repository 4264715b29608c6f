"""Overlap detection between a proposed booking and existing ones.

Intervals are half-open: a booking ending at 14:00 does not conflict with
one starting at 14:00.  The caller pre-filters ``existing`` to a single
room and day.
"""

from __future__ import annotations

from typing import Iterable, Optional, TypeVar

from availability.models.interval import Interval

S = TypeVar("S")


def has_conflict(proposed: Interval, existing: Iterable[S]) -> Optional[S]:
    """Return the earliest-starting item in ``existing`` that overlaps ``proposed``.

    Items may be intervals or bookings; the matching item is returned as
    given.  Single pass, O(n).
    """
    first: Optional[S] = None
    for item in existing:
        if not proposed.overlaps(item):
            continue
        if first is None or item.start < first.start:  # type: ignore[attr-defined]
            first = item
    return first


def find_conflicts(proposed: Interval, existing: Iterable[S]) -> list[S]:
    """Return every item in ``existing`` that overlaps ``proposed``, sorted by start."""
    hits = [item for item in existing if proposed.overlaps(item)]
    hits.sort(key=lambda item: (item.start, item.end))  # type: ignore[attr-defined]
    return hits
