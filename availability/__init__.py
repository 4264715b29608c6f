"""Room availability and slot-suggestion engine.

Four pure operations over a room's bookings for one day:

- ``merge_blocks``: fold touching bookings into contiguous busy blocks.
- ``compute_status``: what a room card shows at a given instant.
- ``has_conflict``: the earliest existing booking a proposal overlaps.
- ``find_next_slots``: the next free slots of a given length.

All times are timezone-naive (see ``availability.naive_time``).
"""

from .blocks import merge_blocks
from .conflicts import find_conflicts, has_conflict
from .errors import AvailabilityError, ConfigurationError, InvalidInterval
from .models import (
    Block,
    Booking,
    BusinessWindow,
    DailyLoad,
    HeavyBookingThresholds,
    Interval,
    RoomConfig,
    SpecialState,
    StatusKind,
    StatusResult,
)
from .slots import find_next_slots, suggest_slot
from .status import compute_status, daily_load
from .timeline import Timeline, TimelineSegment, build_timeline

__all__ = [
    "AvailabilityError",
    "Block",
    "Booking",
    "BusinessWindow",
    "ConfigurationError",
    "DailyLoad",
    "HeavyBookingThresholds",
    "Interval",
    "InvalidInterval",
    "RoomConfig",
    "SpecialState",
    "StatusKind",
    "StatusResult",
    "Timeline",
    "TimelineSegment",
    "build_timeline",
    "compute_status",
    "daily_load",
    "find_conflicts",
    "find_next_slots",
    "has_conflict",
    "merge_blocks",
    "suggest_slot",
]
