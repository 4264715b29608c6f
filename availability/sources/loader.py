"""Load bookings and rooms from JSONL files (one JSON object per line)."""

from __future__ import annotations

import json
from pathlib import Path

from availability.models.booking import Booking
from availability.models.room import RoomConfig


def load_bookings_jsonl(path: str | Path) -> list[Booking]:
    """Load every booking in a JSONL file.

    Blank lines are skipped.  Times are read as naive wall-clock values.
    """
    return [Booking(**data) for data in _read_jsonl(path)]


def load_rooms_jsonl(path: str | Path) -> list[RoomConfig]:
    return [RoomConfig(**data) for data in _read_jsonl(path)]


def _read_jsonl(path: str | Path) -> list[dict]:
    path = Path(path)
    records: list[dict] = []
    for lineno, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            records.append(json.loads(line))
        except json.JSONDecodeError as exc:
            raise ValueError(f"{path}:{lineno}: invalid JSON: {exc}") from exc
    return records
