"""Abstract collaborators that feed the engine.

The engine itself only takes plain data.  These interfaces describe where
that data comes from: a booking repository and a room configuration
source.  Any backend (REST API, database, fixture file) implements them.
"""

from abc import ABC, abstractmethod
from datetime import date

from availability.models.booking import Booking
from availability.models.room import RoomConfig


class BookingSource(ABC):
    """Booking repository for one or more rooms."""

    @abstractmethod
    def bookings_for(self, room_id: str, day: date) -> list[Booking]:
        """Return the bookings of ``room_id`` that start on ``day``.

        Args:
            room_id: The room to query.
            day: Calendar day in naive local time.

        Returns:
            A fresh list; callers may keep it as a snapshot.
        """


class RoomSource(ABC):
    """Room configuration: identity and special state."""

    @abstractmethod
    def room(self, room_id: str) -> RoomConfig:
        """Return the configuration of ``room_id``.

        Raises:
            KeyError: If the room is unknown.
        """
