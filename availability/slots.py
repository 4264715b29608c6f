"""Search for the next free slots of a given length within business hours."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Union

from availability.blocks import Span
from availability.conflicts import has_conflict
from availability.errors import ConfigurationError
from availability.models.interval import Interval
from availability.models.window import BusinessWindow
from availability.naive_time import TimePoint, at_minutes, minutes_of_day, to_time_point

log = logging.getLogger("availability.slots")


def _search_start(now: TimePoint, day: date, window: BusinessWindow) -> TimePoint:
    """First candidate start: ``now`` rounded up to the grid today, opening time otherwise."""
    opens = window.opens_at(day)
    if day != now.date():
        return opens
    step = window.granularity_minutes
    rounded = -(-minutes_of_day(now) // step) * step
    return max(at_minutes(day, rounded), opens)


def find_next_slots(
    now: TimePoint,
    day: Union[date, datetime],
    window: BusinessWindow,
    duration_minutes: Optional[int] = None,
    max_results: Optional[int] = None,
    existing: Iterable[Span] = (),
) -> list[Interval]:
    """Return up to ``max_results`` free intervals of ``duration_minutes`` on ``day``.

    Candidates start on the window's grid and advance by one granularity
    step whether or not they are accepted, so consecutive suggestions may
    overlap each other; they are alternatives, not a partition of the day.
    Every returned interval lies inside the business window and conflicts
    with nothing in ``existing``.  The first one is the default suggestion.

    ``duration_minutes`` defaults to the window's default duration and
    ``max_results=None`` lists every free start.  Days before ``now`` have
    no slots.
    """
    now = to_time_point(now)
    if isinstance(day, datetime):
        day = day.date()
    if duration_minutes is None:
        duration_minutes = window.default_duration_minutes
    if duration_minutes <= 0:
        raise ConfigurationError(f"duration_minutes must be positive, got {duration_minutes}")
    if max_results is not None and max_results < 0:
        raise ConfigurationError(f"max_results must not be negative, got {max_results}")

    if day < now.date() or max_results == 0:
        return []

    busy = list(existing)
    start = _search_start(now, day, window)
    close = window.closes_at(day)
    step = timedelta(minutes=window.granularity_minutes)
    length = timedelta(minutes=duration_minutes)
    log.debug("Slot search on %s from %s to %s (%d min)", day, start, close, duration_minutes)

    slots: list[Interval] = []
    while start + length <= close:
        if max_results is not None and len(slots) >= max_results:
            break
        candidate = Interval(start, start + length)
        if has_conflict(candidate, busy) is None:
            slots.append(candidate)
        start += step
    return slots


def suggest_slot(
    now: TimePoint,
    day: Union[date, datetime],
    window: BusinessWindow,
    duration_minutes: Optional[int] = None,
    existing: Iterable[Span] = (),
) -> Optional[Interval]:
    """The slot a booking form preselects: the first free one, if any."""
    slots = find_next_slots(now, day, window, duration_minutes, 1, existing)
    return slots[0] if slots else None
