"""Pydantic model for bookings read from the booking subsystem."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from availability.errors import InvalidInterval
from availability.models.interval import Interval
from availability.naive_time import to_time_point


class Booking(BaseModel):
    """One reservation of a room.

    Times accept naive datetimes or SQL / ISO strings; any offset is dropped
    without conversion.  The engine only ever reads :attr:`interval`.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    room_id: str = ""
    start: datetime
    end: datetime
    title: str = ""
    owner_ref: Optional[str] = None
    comment: str = ""

    @field_validator("id", "room_id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        # Backend ids are integers; the engine treats them as opaque strings.
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("start", "end", mode="before")
    @classmethod
    def _naive(cls, value: object) -> object:
        if isinstance(value, (str, datetime)):
            return to_time_point(value)
        return value

    @model_validator(mode="after")
    def _check_order(self) -> "Booking":
        if not self.start < self.end:
            raise InvalidInterval(self.start, self.end)
        return self

    @property
    def interval(self) -> Interval:
        return Interval(self.start, self.end)

    @property
    def duration_minutes(self) -> int:
        return self.interval.duration_minutes
