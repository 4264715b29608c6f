"""Booking and room collaborators."""

from .base import BookingSource, RoomSource
from .loader import load_bookings_jsonl, load_rooms_jsonl
from .memory import InMemoryBookingSource, InMemoryRoomSource

__all__ = [
    "BookingSource",
    "InMemoryBookingSource",
    "InMemoryRoomSource",
    "RoomSource",
    "load_bookings_jsonl",
    "load_rooms_jsonl",
]
