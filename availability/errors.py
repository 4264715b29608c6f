"""Exceptions raised by the availability engine."""

from __future__ import annotations


class AvailabilityError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(AvailabilityError):
    """Malformed input: bad window, non-positive duration, unparseable time."""


class InvalidInterval(ConfigurationError):
    """An interval whose start is not strictly before its end."""

    def __init__(self, start: object, end: object) -> None:
        super().__init__(f"Interval start {start} must be before end {end}")
        self.start = start
        self.end = end
