"""In-memory collaborators, for fixtures, tests and small deployments."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

from availability.models.booking import Booking
from availability.models.room import RoomConfig

from .base import BookingSource, RoomSource

logger = logging.getLogger(__name__)


class InMemoryBookingSource(BookingSource):
    """BookingSource backed by a list of bookings."""

    def __init__(self, bookings: Iterable[Booking] = ()) -> None:
        self._bookings: list[Booking] = list(bookings)

    def add(self, booking: Booking) -> None:
        self._bookings.append(booking)
        logger.debug("Added booking %s for room %s", booking.id, booking.room_id)

    def remove(self, booking_id: str) -> bool:
        before = len(self._bookings)
        self._bookings = [b for b in self._bookings if b.id != booking_id]
        return len(self._bookings) < before

    def bookings_for(self, room_id: str, day: date) -> list[Booking]:
        found = [
            b for b in self._bookings
            if b.room_id == room_id and b.start.date() == day
        ]
        found.sort(key=lambda b: (b.start, b.end))
        return found


class InMemoryRoomSource(RoomSource):
    """RoomSource backed by a dict of room configs."""

    def __init__(self, rooms: Iterable[RoomConfig] = ()) -> None:
        self._rooms: dict[str, RoomConfig] = {r.id: r for r in rooms}

    def put(self, room: RoomConfig) -> None:
        self._rooms[room.id] = room

    def room(self, room_id: str) -> RoomConfig:
        try:
            return self._rooms[room_id]
        except KeyError:
            raise KeyError(f"Unknown room: {room_id}") from None
