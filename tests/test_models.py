"""Tests for the data models: intervals, bookings, business windows, rooms."""

from datetime import date, datetime

import pytest

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from availability.errors import ConfigurationError, InvalidInterval
from availability.models import (
    Block,
    Booking,
    BusinessWindow,
    Interval,
    RoomConfig,
    SpecialState,
    StatusKind,
    StatusResult,
)


def _t(hhmm: str) -> datetime:
    h, m = hhmm.split(":")
    return datetime(2025, 11, 13, int(h), int(m))


# ── Interval / Block ────────────────────────────────────────────────


class TestInterval:
    def test_duration(self):
        iv = Interval(_t("09:00"), _t("10:30"))
        assert iv.duration_minutes == 90
        assert iv.duration_seconds == 5400

    def test_empty_interval_rejected(self):
        with pytest.raises(InvalidInterval):
            Interval(_t("09:00"), _t("09:00"))

    def test_reversed_interval_rejected(self):
        with pytest.raises(InvalidInterval):
            Interval(_t("10:00"), _t("09:00"))

    def test_invalid_interval_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            Interval(_t("10:00"), _t("09:00"))

    def test_contains_is_closed_open(self):
        iv = Interval(_t("09:00"), _t("10:00"))
        assert iv.contains(_t("09:00"))
        assert iv.contains(_t("09:59"))
        assert not iv.contains(_t("10:00"))

    def test_touching_is_not_overlap(self):
        a = Interval(_t("13:30"), _t("14:00"))
        b = Interval(_t("14:00"), _t("15:00"))
        assert not a.overlaps(b)
        assert not b.overlaps(a)

    def test_block_is_an_interval(self):
        block = Block(_t("09:00"), _t("11:30"), 2)
        assert isinstance(block, Interval)
        assert block.size == 2


# ── Booking ─────────────────────────────────────────────────────────


class TestBooking:
    def test_from_sql_strings(self):
        b = Booking(id="1", start="2025-11-13 09:00:00", end="2025-11-13 10:00:00", title="Standup")
        assert b.start == _t("09:00")
        assert b.interval == Interval(_t("09:00"), _t("10:00"))
        assert b.duration_minutes == 60

    def test_integer_ids_become_strings(self):
        b = Booking(id=7, room_id=3, start=_t("09:00"), end=_t("10:00"))
        assert b.id == "7"
        assert b.room_id == "3"

    def test_iso_offset_dropped(self):
        b = Booking(id="1", start="2025-11-13T09:00:00Z", end="2025-11-13T10:00:00+02:00")
        assert b.start == _t("09:00")
        assert b.end == _t("10:00")
        assert b.start.tzinfo is None

    def test_reversed_times_rejected(self):
        with pytest.raises(InvalidInterval):
            Booking(id="1", start=_t("10:00"), end=_t("09:00"))

    def test_defaults(self):
        b = Booking(id="1", start=_t("09:00"), end=_t("10:00"))
        assert b.title == ""
        assert b.owner_ref is None


# ── BusinessWindow ──────────────────────────────────────────────────


class TestBusinessWindow:
    def test_defaults(self):
        w = BusinessWindow()
        assert w.open_minutes == 480
        assert w.close_minutes == 1200
        assert w.total_minutes == 720
        assert w.granularity_minutes == 15
        assert w.default_duration_minutes == 30

    def test_bounds_for_day(self):
        w = BusinessWindow()
        assert w.opens_at(date(2025, 11, 13)) == _t("08:00")
        assert w.closes_at(date(2025, 11, 13)) == _t("20:00")

    def test_all_day_closes_at_next_midnight(self):
        w = BusinessWindow.all_day()
        assert w.total_minutes == 1440
        assert w.closes_at(date(2025, 11, 13)) == datetime(2025, 11, 14)

    def test_is_open(self):
        w = BusinessWindow()
        assert w.is_open(_t("08:00"))
        assert not w.is_open(_t("20:00"))
        assert not w.is_open(_t("07:59"))

    def test_zero_granularity_rejected(self):
        with pytest.raises(ConfigurationError):
            BusinessWindow(granularity_minutes=0)

    def test_non_positive_duration_rejected(self):
        with pytest.raises(ConfigurationError):
            BusinessWindow(default_duration_minutes=-30)

    def test_open_after_close_rejected(self):
        with pytest.raises(ConfigurationError):
            BusinessWindow(open_time="20:00", close_time="08:00")

    def test_bad_clock_string_rejected(self):
        with pytest.raises(ConfigurationError):
            BusinessWindow(open_time="8am")


# ── RoomConfig / StatusResult ───────────────────────────────────────


class TestRoomConfig:
    def test_active_means_no_special_state(self):
        assert RoomConfig(id=1, special_state="active").special_state is None

    def test_maintenance(self):
        room = RoomConfig(id="r1", special_state="maintenance")
        assert room.special_state == SpecialState.MAINTENANCE

    @pytest.mark.parametrize("spelling", ["night_rest", "night-rest", "Night-Rest "])
    def test_night_rest_spellings(self, spelling):
        room = RoomConfig(id="r1", special_state=spelling)
        assert room.special_state == SpecialState.NIGHT_REST


class TestStatusResult:
    def test_special_states_not_interactive(self):
        result = StatusResult(kind=StatusKind.NIGHT_REST, label="Night rest")
        assert not result.interactive

    def test_occupied_family(self):
        assert StatusResult(kind=StatusKind.OCCUPIED, label="x").occupied
        assert StatusResult(kind=StatusKind.FULLY_BOOKED, label="x").occupied
        assert not StatusResult(kind=StatusKind.AVAILABLE_SOON, label="x").occupied
