"""Live timeline of the block a room is currently in.

Used by the booking form banner: one segment per booking in the running
block, sized by duration, with progress through the active segment and
the booking that follows the block.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from availability.blocks import block_of
from availability.models.booking import Booking
from availability.naive_time import TimePoint, diff_seconds, to_time_point


@dataclass
class TimelineSegment:
    booking: Booking
    duration_minutes: int
    width_fraction: float


@dataclass
class Timeline:
    """The running block, split into its bookings."""

    segments: list[TimelineSegment] = field(default_factory=list)
    current_index: int = -1
    current_progress: float = 0.0
    block_end: Optional[TimePoint] = None
    next_booking: Optional[Booking] = None


def build_timeline(now: TimePoint, bookings: Iterable[Booking]) -> Optional[Timeline]:
    """Return the timeline for the block occupying ``now``, or None if the room is free."""
    now = to_time_point(now)
    bookings = sorted(bookings, key=lambda b: (b.start, b.end))

    current = next((b for b in bookings if b.start <= now < b.end), None)
    if current is None:
        return None

    block = block_of(current, bookings)
    members = [b for b in bookings if block.start <= b.start < block.end]
    block_minutes = block.duration_minutes or 1

    timeline = Timeline(block_end=block.end)
    for idx, booking in enumerate(members):
        minutes = booking.duration_minutes
        timeline.segments.append(
            TimelineSegment(
                booking=booking,
                duration_minutes=minutes,
                width_fraction=minutes / block_minutes,
            )
        )
        if timeline.current_index < 0 and booking.start <= now < booking.end:
            timeline.current_index = idx
            elapsed = diff_seconds(booking.start, now)
            total = diff_seconds(booking.start, booking.end)
            timeline.current_progress = min(max(elapsed / total, 0.0), 1.0)

    timeline.next_booking = next((b for b in bookings if b.start >= block.end), None)
    return timeline
