"""Data models for the availability engine."""

from .booking import Booking
from .interval import Block, Interval
from .room import RoomConfig
from .status import (
    DailyLoad,
    HeavyBookingThresholds,
    SpecialState,
    StatusKind,
    StatusResult,
)
from .window import BusinessWindow

__all__ = [
    "Block",
    "Booking",
    "BusinessWindow",
    "DailyLoad",
    "HeavyBookingThresholds",
    "Interval",
    "RoomConfig",
    "SpecialState",
    "StatusKind",
    "StatusResult",
]
