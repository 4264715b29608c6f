"""Shared helpers: bookings on a fixed day, 2025-11-13."""

from datetime import date, datetime

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from availability.models import Booking, Interval

DAY = date(2025, 11, 13)


def at(hhmm: str, day: date = DAY) -> datetime:
    """``"09:30"`` on the test day."""
    h, m = hhmm.split(":")
    return datetime(day.year, day.month, day.day, int(h), int(m))


def iv(start: str, end: str) -> Interval:
    return Interval(at(start), at(end))


def booking(booking_id: str, start: str, end: str, title: str = "", room_id: str = "r1") -> Booking:
    return Booking(id=booking_id, room_id=room_id, start=at(start), end=at(end), title=title)
