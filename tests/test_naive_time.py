"""Tests for the timezone-naive time model."""

from datetime import date, datetime, timedelta, timezone

import pytest

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from availability.errors import ConfigurationError
from availability.naive_time import (
    add_minutes,
    at_minutes,
    compare,
    diff_seconds,
    format_duration,
    format_hhmm,
    minutes_of_day,
    now,
    parse_clock,
    parse_naive,
    to_time_point,
)


# ── Parsing ─────────────────────────────────────────────────────────


class TestParseNaive:
    def test_sql_format(self):
        assert parse_naive("2025-11-13 14:30:00") == datetime(2025, 11, 13, 14, 30)

    def test_iso_format(self):
        assert parse_naive("2025-11-13T14:30:45") == datetime(2025, 11, 13, 14, 30, 45)

    def test_without_seconds(self):
        assert parse_naive("2025-11-13 08:15") == datetime(2025, 11, 13, 8, 15)

    def test_date_only_is_midnight(self):
        assert parse_naive("2025-11-13") == datetime(2025, 11, 13)

    def test_utc_suffix_is_dropped_not_converted(self):
        """The wall-clock fields are kept exactly as written."""
        assert parse_naive("2025-11-13T14:30:45.000Z") == datetime(2025, 11, 13, 14, 30, 45)

    def test_offset_is_dropped_not_converted(self):
        assert parse_naive("2025-11-13T23:30:00+05:00") == datetime(2025, 11, 13, 23, 30)

    def test_garbage_rejected(self):
        with pytest.raises(ConfigurationError):
            parse_naive("13.11.2025 14:30")

    def test_impossible_date_rejected(self):
        with pytest.raises(ConfigurationError):
            parse_naive("2025-02-30 10:00:00")

    def test_empty_rejected(self):
        with pytest.raises(ConfigurationError):
            parse_naive("")


class TestToTimePoint:
    def test_aware_datetime_keeps_wall_clock(self):
        aware = datetime(2025, 11, 13, 14, 30, tzinfo=timezone(timedelta(hours=2)))
        result = to_time_point(aware)
        assert result == datetime(2025, 11, 13, 14, 30)
        assert result.tzinfo is None

    def test_date_becomes_midnight(self):
        assert to_time_point(date(2025, 11, 13)) == datetime(2025, 11, 13)

    def test_microseconds_dropped(self):
        assert to_time_point(datetime(2025, 11, 13, 9, 0, 0, 500000)).microsecond == 0

    def test_unsupported_type(self):
        with pytest.raises(ConfigurationError):
            to_time_point(12345)

    def test_now_returns_supplied_value(self):
        t = datetime(2025, 11, 13, 9, 30)
        assert now(t) == t


class TestParseClock:
    def test_regular(self):
        assert parse_clock("08:00") == 480
        assert parse_clock("20:00") == 1200

    def test_single_digit_hour(self):
        assert parse_clock("8:30") == 510

    def test_midnight_close(self):
        assert parse_clock("24:00") == 1440

    @pytest.mark.parametrize("text", ["24:01", "08:60", "8am", ""])
    def test_invalid(self, text):
        with pytest.raises(ConfigurationError):
            parse_clock(text)


# ── Arithmetic ──────────────────────────────────────────────────────


class TestArithmetic:
    def test_diff_positive_when_second_is_later(self):
        a = datetime(2025, 11, 13, 14, 0)
        b = datetime(2025, 11, 13, 15, 30)
        assert diff_seconds(a, b) == 5400

    def test_diff_negative_when_second_is_earlier(self):
        a = datetime(2025, 11, 13, 15, 0)
        b = datetime(2025, 11, 13, 14, 0)
        assert diff_seconds(a, b) == -3600

    def test_add_minutes_carries_over_midnight(self):
        t = datetime(2025, 11, 13, 23, 50)
        assert add_minutes(t, 20) == datetime(2025, 11, 14, 0, 10)

    def test_compare(self):
        a = datetime(2025, 11, 13, 9, 0)
        b = datetime(2025, 11, 13, 10, 0)
        assert compare(a, b) == -1
        assert compare(b, a) == 1
        assert compare(a, a) == 0

    def test_minutes_of_day_ignores_seconds(self):
        assert minutes_of_day(datetime(2025, 11, 13, 9, 7, 59)) == 547

    def test_at_minutes_1440_is_next_midnight(self):
        assert at_minutes(date(2025, 11, 13), 1440) == datetime(2025, 11, 14)


# ── Formatting ──────────────────────────────────────────────────────


class TestFormatting:
    def test_hhmm(self):
        assert format_hhmm(datetime(2025, 11, 13, 8, 5)) == "08:05"

    def test_duration_minutes_only(self):
        assert format_duration(45) == "45 min"

    def test_duration_whole_hours(self):
        assert format_duration(120) == "2 h"

    def test_duration_hours_and_minutes(self):
        assert format_duration(135) == "2 h 15 min"
