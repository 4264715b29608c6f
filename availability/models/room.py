"""Pydantic model for a room's configuration."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from availability.models.status import SpecialState


class RoomConfig(BaseModel):
    """Static room data the engine needs: identity and special state."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    capacity: int = 0
    special_state: Optional[SpecialState] = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("special_state", mode="before")
    @classmethod
    def _active_is_none(cls, value: object) -> object:
        # The room table stores "active" for rooms without a special state.
        if not isinstance(value, str):
            return value
        value = value.strip().lower().replace("-", "_")
        return None if value in ("", "active", "available") else value
