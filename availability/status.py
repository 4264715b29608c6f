"""Room status engine.

Decides what a room card shows at ``now``.  The checks run in a fixed
order and the first match wins:

1. a configured special state (maintenance, inactive, night rest);
2. a booking occupying ``now``, extended to its block;
3. a later booking today;
4. nothing else today.

The function is pure.  Callers re-run it on their own tick (once a minute
for the label, once a second for a countdown) with a fresh snapshot.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from availability.blocks import Span, block_of
from availability.errors import ConfigurationError
from availability.models.status import (
    SPECIAL_KINDS,
    DailyLoad,
    HeavyBookingThresholds,
    SpecialState,
    StatusKind,
    StatusResult,
)
from availability.models.window import BusinessWindow
from availability.naive_time import TimePoint, diff_seconds, format_hhmm, to_time_point

log = logging.getLogger("availability.status")

SPECIAL_LABELS = {
    SpecialState.MAINTENANCE: "Under maintenance",
    SpecialState.INACTIVE: "Not available",
    SpecialState.NIGHT_REST: "Night rest",
}


def daily_load(bookings: Iterable[Span]) -> DailyLoad:
    """Count bookings and booked minutes for one room-day."""
    count = 0
    minutes = 0
    for b in bookings:
        count += 1
        minutes += diff_seconds(b.start, b.end) // 60
    return DailyLoad(booking_count=count, booked_minutes=minutes)


def _special_state(value: Union[SpecialState, str, None]) -> Optional[SpecialState]:
    if value is None or isinstance(value, SpecialState):
        return value
    try:
        return SpecialState(value.strip().lower().replace("-", "_"))
    except ValueError:
        raise ConfigurationError(f"Unknown special room state: {value!r}") from None


def compute_status(
    now: TimePoint,
    special_state: Union[SpecialState, str, None],
    bookings_today: Iterable[Span],
    window: BusinessWindow,
    *,
    current_booking: Optional[Span] = None,
    load: Optional[DailyLoad] = None,
    thresholds: Optional[HeavyBookingThresholds] = None,
) -> StatusResult:
    """Compute the display status of one room.

    Args:
        now: Current naive time, supplied by the caller.
        special_state: The room's configured special state, if any.
        bookings_today: The room's bookings for the day of ``now``.
        window: Business window; its length is the base for the load ratio.
        current_booking: Optional booking the caller believes is running.
            If it already ended it is ignored and the status is worked
            out from ``bookings_today`` alone.  It is matched to the day
            list by its span, so a copy of a listed booking counts once.
        load: Daily load if the caller already has it; derived from the
            bookings otherwise.
        thresholds: When an occupied room counts as fully booked.

    Returns:
        A :class:`StatusResult`.
    """
    now = to_time_point(now)

    state = _special_state(special_state)
    if state is not None:
        return StatusResult(kind=SPECIAL_KINDS[state], label=SPECIAL_LABELS[state])

    candidates = list(bookings_today)
    if current_booking is not None:
        if current_booking.end <= now:
            log.debug(
                "Ignoring stale current booking that ended at %s (now %s)",
                current_booking.end, now,
            )
        elif not any(
            (b.start, b.end) == (current_booking.start, current_booking.end)
            for b in candidates
        ):
            candidates.append(current_booking)

    occupying = [b for b in candidates if b.start <= now < b.end]
    if occupying:
        current = min(occupying, key=lambda b: (b.start, b.end))
        block = block_of(current, candidates)

        thresholds = thresholds or HeavyBookingThresholds()
        if load is None:
            load = daily_load(candidates)
        if thresholds.is_heavy(load, window.total_minutes):
            return StatusResult(
                kind=StatusKind.FULLY_BOOKED,
                label="Fully booked today",
                progress_fraction=0.0,
            )

        total = diff_seconds(current.start, block.end)
        elapsed = diff_seconds(current.start, now)
        progress = min(max(elapsed / total, 0.0), 1.0) if total > 0 else 0.0
        return StatusResult(
            kind=StatusKind.OCCUPIED,
            label=f"Occupied until {format_hhmm(block.end)}",
            progress_fraction=progress,
            remaining_seconds=max(diff_seconds(now, block.end), 0),
            until=block.end,
        )

    upcoming = [b for b in candidates if b.start > now]
    if upcoming:
        nxt = min(upcoming, key=lambda b: (b.start, b.end))
        return StatusResult(
            kind=StatusKind.AVAILABLE_SOON,
            label=f"Available until {format_hhmm(nxt.start)}",
            minutes_until_next=diff_seconds(now, nxt.start) // 60,
            until=nxt.start,
        )

    return StatusResult(kind=StatusKind.AVAILABLE, label="Available all day")
