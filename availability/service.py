"""RoomAvailability: wires the collaborators to the pure engine operations.

Each call takes a fresh snapshot from the booking and room sources and
hands plain data to the engine.  Nothing is cached between calls.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Union

from availability.blocks import merge_blocks
from availability.conflicts import has_conflict
from availability.models.booking import Booking
from availability.models.interval import Block, Interval
from availability.models.status import HeavyBookingThresholds, StatusResult
from availability.models.window import BusinessWindow
from availability.naive_time import TimePoint, to_time_point
from availability.slots import find_next_slots
from availability.sources.base import BookingSource, RoomSource
from availability.status import compute_status
from availability.timeline import Timeline, build_timeline

logger = logging.getLogger(__name__)


class RoomAvailability:
    """Availability queries for rooms served by a booking and a room source."""

    def __init__(
        self,
        bookings: BookingSource,
        rooms: RoomSource,
        window: Optional[BusinessWindow] = None,
        thresholds: Optional[HeavyBookingThresholds] = None,
        max_suggestions: Optional[int] = None,
    ) -> None:
        if window is None or thresholds is None or max_suggestions is None:
            from availability.config import settings

            window = window or settings.business_window()
            thresholds = thresholds or settings.heavy_thresholds()
            if max_suggestions is None:
                max_suggestions = settings.max_suggestions
        self._bookings = bookings
        self._rooms = rooms
        self._window = window
        self._thresholds = thresholds
        self._max_suggestions = max_suggestions

    @property
    def window(self) -> BusinessWindow:
        return self._window

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def status(self, room_id: str, now: TimePoint) -> StatusResult:
        now = to_time_point(now)
        room = self._rooms.room(room_id)
        result = compute_status(
            now,
            room.special_state,
            self._bookings.bookings_for(room_id, now.date()),
            self._window,
            thresholds=self._thresholds,
        )
        logger.debug("Room %s at %s: %s", room_id, now, result.kind.value)
        return result

    def check(self, room_id: str, proposed: Interval) -> Optional[Booking]:
        """Return the earliest existing booking that clashes with ``proposed``."""
        existing = self._bookings.bookings_for(room_id, proposed.start.date())
        conflict = has_conflict(proposed, existing)
        if conflict is not None:
            logger.info(
                "Proposed %s-%s in room %s conflicts with booking %s",
                proposed.start, proposed.end, room_id, conflict.id,
            )
        return conflict

    def suggest(
        self,
        room_id: str,
        now: TimePoint,
        day: Union[date, datetime, None] = None,
        duration_minutes: Optional[int] = None,
        max_results: Optional[int] = None,
    ) -> list[Interval]:
        """Next free slots for ``room_id``; the first is the default choice."""
        now = to_time_point(now)
        if day is None:
            day = now.date()
        elif isinstance(day, datetime):
            day = day.date()
        if max_results is None:
            max_results = self._max_suggestions
        return find_next_slots(
            now,
            day,
            self._window,
            duration_minutes,
            max_results,
            self._bookings.bookings_for(room_id, day),
        )

    def blocks(self, room_id: str, day: date) -> list[Block]:
        return merge_blocks(self._bookings.bookings_for(room_id, day))

    def timeline(self, room_id: str, now: TimePoint) -> Optional[Timeline]:
        now = to_time_point(now)
        return build_timeline(now, self._bookings.bookings_for(room_id, now.date()))
