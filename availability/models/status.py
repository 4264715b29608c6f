"""Pydantic models for room status results and daily load."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class SpecialState(str, Enum):
    """Room-level states configured outside the booking data."""

    MAINTENANCE = "maintenance"
    INACTIVE = "inactive"
    NIGHT_REST = "night_rest"


class StatusKind(str, Enum):
    AVAILABLE = "available"              # free for the rest of the day
    AVAILABLE_SOON = "available-soon"    # free now, booked later today
    OCCUPIED = "occupied"
    FULLY_BOOKED = "fully-booked"        # occupied and heavily booked today
    MAINTENANCE = "maintenance"
    INACTIVE = "inactive"
    NIGHT_REST = "night-rest"


SPECIAL_KINDS = {
    SpecialState.MAINTENANCE: StatusKind.MAINTENANCE,
    SpecialState.INACTIVE: StatusKind.INACTIVE,
    SpecialState.NIGHT_REST: StatusKind.NIGHT_REST,
}


class StatusResult(BaseModel):
    """The display status of a room at one instant."""

    model_config = ConfigDict(frozen=True)

    kind: StatusKind
    label: str
    progress_fraction: Optional[float] = None
    remaining_seconds: Optional[int] = None
    minutes_until_next: Optional[int] = None
    until: Optional[datetime] = None

    @property
    def occupied(self) -> bool:
        return self.kind in (StatusKind.OCCUPIED, StatusKind.FULLY_BOOKED)

    @property
    def interactive(self) -> bool:
        """Whether the room card can be used to start a booking."""
        return self.kind not in SPECIAL_KINDS.values()


class DailyLoad(BaseModel):
    """How busy a room is over one day."""

    model_config = ConfigDict(frozen=True)

    booking_count: int = 0
    booked_minutes: int = 0


class HeavyBookingThresholds(BaseModel):
    """When an occupied room is reported as fully booked for the day.

    The defaults are a product heuristic: three bookings, or two thirds of
    the business window.
    """

    model_config = ConfigDict(frozen=True)

    booking_count: int = 3
    booked_ratio: float = 0.66

    def is_heavy(self, load: DailyLoad, window_minutes: int) -> bool:
        if load.booking_count >= self.booking_count:
            return True
        if window_minutes <= 0:
            return False
        return load.booked_minutes / window_minutes >= self.booked_ratio
