"""Timezone-naive time model.

A TimePoint is a plain ``datetime`` with ``tzinfo=None``.  Values are taken
at face value: ``"2025-11-13 14:30:00"`` means 14:30 on that day, and an
ISO string with a ``Z`` or ``+02:00`` suffix keeps its wall-clock fields
while the offset is dropped.  Nothing here ever converts between zones or
applies daylight-saving rules, so what is stored is exactly what is shown.

Naive ``datetime`` subtraction is plain component arithmetic, which is all
the engine needs for ordering, durations and stepping.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta

from availability.errors import ConfigurationError

TimePoint = datetime

MINUTES_PER_DAY = 24 * 60

_NAIVE_RE = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})"
    r"(?:[T ](?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?"
    r"(?:\.\d+)?"
    r"(?:Z|[+-]\d{2}:?\d{2})?)?$"
)


def now(current: TimePoint) -> TimePoint:
    """Return the caller-supplied current time.

    The engine never reads a system clock; "now" always comes from the
    caller so that every computation is reproducible.
    """
    return to_time_point(current)


def to_time_point(value: datetime | date | str) -> TimePoint:
    """Coerce ``value`` into a naive TimePoint without any zone conversion."""
    if isinstance(value, datetime):
        return value.replace(tzinfo=None, microsecond=0)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        return parse_naive(value)
    raise ConfigurationError(f"Cannot interpret {value!r} as a point in time")


def parse_naive(text: str) -> TimePoint:
    """Parse an SQL or ISO datetime string into its component fields.

    >>> parse_naive("2025-11-13 14:30:00")
    datetime.datetime(2025, 11, 13, 14, 30)
    >>> parse_naive("2025-11-13T14:30:00.000Z")
    datetime.datetime(2025, 11, 13, 14, 30)
    """
    match = _NAIVE_RE.match(text.strip()) if text else None
    if match is None:
        raise ConfigurationError(f"Unrecognised datetime string: {text!r}")

    try:
        day = date.fromisoformat(match.group("date"))
        return datetime(
            day.year,
            day.month,
            day.day,
            int(match.group("hour") or 0),
            int(match.group("minute") or 0),
            int(match.group("second") or 0),
        )
    except ValueError as exc:
        raise ConfigurationError(f"Invalid datetime string {text!r}: {exc}") from exc


def parse_clock(text: str) -> int:
    """Parse ``"HH:MM"`` into minutes after midnight. ``"24:00"`` is allowed."""
    match = re.fullmatch(r"(\d{1,2}):(\d{2})", text.strip()) if text else None
    if match is None:
        raise ConfigurationError(f"Clock time must look like HH:MM, got {text!r}")
    hours, minutes = int(match.group(1)), int(match.group(2))
    total = hours * 60 + minutes
    if minutes >= 60 or total > MINUTES_PER_DAY:
        raise ConfigurationError(f"Clock time out of range: {text!r}")
    return total


def compare(a: TimePoint, b: TimePoint) -> int:
    """Return -1, 0 or 1 as ``a`` is before, equal to or after ``b``."""
    return (a > b) - (a < b)


def add_minutes(t: TimePoint, n: int) -> TimePoint:
    return t + timedelta(minutes=n)


def diff_seconds(a: TimePoint, b: TimePoint) -> int:
    """Seconds from ``a`` to ``b``; positive if ``b`` is after ``a``."""
    return int((b - a).total_seconds())


def minutes_of_day(t: TimePoint) -> int:
    """Whole minutes since midnight, ignoring seconds."""
    return t.hour * 60 + t.minute


def at_minutes(day: date, minutes: int) -> TimePoint:
    """The TimePoint ``minutes`` after midnight of ``day``.

    1440 lands on the following midnight, which is how a 24:00 close is
    represented.
    """
    return datetime(day.year, day.month, day.day) + timedelta(minutes=minutes)


def format_hhmm(t: TimePoint) -> str:
    return f"{t.hour:02d}:{t.minute:02d}"


def format_duration(minutes: int) -> str:
    """Render a minute count as ``"45 min"``, ``"2 h"`` or ``"2 h 15 min"``."""
    if minutes < 60:
        return f"{minutes} min"
    hours, rest = divmod(minutes, 60)
    if rest == 0:
        return f"{hours} h"
    return f"{hours} h {rest} min"
