"""Business window: the daily bounds and grid for bookings and suggestions."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, model_validator

from availability.errors import ConfigurationError
from availability.naive_time import TimePoint, at_minutes, parse_clock


class BusinessWindow(BaseModel):
    """Opening hours plus slot granularity, immutable for one computation.

    ``close_time`` may be ``"24:00"``; the 24-hour developer window is just
    ``BusinessWindow(open_time="00:00", close_time="24:00")``.
    """

    model_config = ConfigDict(frozen=True)

    open_time: str = "08:00"
    close_time: str = "20:00"
    granularity_minutes: int = 15
    default_duration_minutes: int = 30

    @model_validator(mode="after")
    def _validate(self) -> "BusinessWindow":
        if self.granularity_minutes <= 0:
            raise ConfigurationError(
                f"granularity_minutes must be positive, got {self.granularity_minutes}"
            )
        if self.default_duration_minutes <= 0:
            raise ConfigurationError(
                "default_duration_minutes must be positive, "
                f"got {self.default_duration_minutes}"
            )
        if self.open_minutes >= self.close_minutes:
            raise ConfigurationError(
                f"open_time {self.open_time} must be before close_time {self.close_time}"
            )
        return self

    @classmethod
    def all_day(cls, granularity_minutes: int = 15, default_duration_minutes: int = 30) -> "BusinessWindow":
        return cls(
            open_time="00:00",
            close_time="24:00",
            granularity_minutes=granularity_minutes,
            default_duration_minutes=default_duration_minutes,
        )

    @property
    def open_minutes(self) -> int:
        return parse_clock(self.open_time)

    @property
    def close_minutes(self) -> int:
        return parse_clock(self.close_time)

    @property
    def total_minutes(self) -> int:
        return self.close_minutes - self.open_minutes

    def opens_at(self, day: date) -> TimePoint:
        return at_minutes(day, self.open_minutes)

    def closes_at(self, day: date) -> TimePoint:
        return at_minutes(day, self.close_minutes)

    def is_open(self, t: TimePoint) -> bool:
        return self.opens_at(t.date()) <= t < self.closes_at(t.date())
