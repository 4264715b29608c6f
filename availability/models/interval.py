"""Half-open time intervals and merged busy blocks."""

from __future__ import annotations

from dataclasses import dataclass

from availability.errors import InvalidInterval
from availability.naive_time import TimePoint, diff_seconds


@dataclass(frozen=True, order=True)
class Interval:
    """A span ``[start, end)`` of naive time. ``start`` must be before ``end``."""

    start: TimePoint
    end: TimePoint

    def __post_init__(self) -> None:
        if self.start.tzinfo is not None or self.end.tzinfo is not None:
            object.__setattr__(self, "start", self.start.replace(tzinfo=None))
            object.__setattr__(self, "end", self.end.replace(tzinfo=None))
        if not self.start < self.end:
            raise InvalidInterval(self.start, self.end)

    @property
    def duration_seconds(self) -> int:
        return diff_seconds(self.start, self.end)

    @property
    def duration_minutes(self) -> int:
        return self.duration_seconds // 60

    def contains(self, t: TimePoint) -> bool:
        """True if ``t`` falls inside the interval (inclusive start, exclusive end)."""
        return self.start <= t < self.end

    def overlaps(self, other) -> bool:
        """True if the two spans share time. Touching at a boundary is not overlap.

        ``other`` may be anything with ``start`` and ``end``, such as a booking.
        """
        return self.start < other.end and self.end > other.start


@dataclass(frozen=True, order=True)
class Block(Interval):
    """A maximal run of touching bookings, spanning first start to last end.

    Blocks are built per computation and never stored.
    """

    size: int = 1
