"""Engine configuration via environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings

from availability.errors import ConfigurationError
from availability.models.status import HeavyBookingThresholds
from availability.models.window import BusinessWindow

log = logging.getLogger("availability.config")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    # Business window
    business_open: str = "08:00"
    business_close: str = "20:00"
    granularity_minutes: int = 15
    default_duration_minutes: int = 30
    max_suggestions: int = 4

    # "Fully booked" heuristic
    heavy_booking_count: int = 3
    heavy_booking_ratio: float = 0.66

    # Developer mode: bookable around the clock
    dev_mode: bool = False

    log_level: str = "INFO"

    model_config = {
        "env_prefix": "AVAILABILITY_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def business_window(self) -> BusinessWindow:
        """The window for a computation. Developer mode swaps in 00:00-24:00."""
        if self.dev_mode:
            return BusinessWindow.all_day(
                granularity_minutes=self.granularity_minutes,
                default_duration_minutes=self.default_duration_minutes,
            )
        return BusinessWindow(
            open_time=self.business_open,
            close_time=self.business_close,
            granularity_minutes=self.granularity_minutes,
            default_duration_minutes=self.default_duration_minutes,
        )

    def heavy_thresholds(self) -> HeavyBookingThresholds:
        return HeavyBookingThresholds(
            booking_count=self.heavy_booking_count,
            booked_ratio=self.heavy_booking_ratio,
        )

    def validate_startup(self) -> list[str]:
        """Validate configuration at startup. Returns warnings, raises on errors."""
        warnings: list[str] = []

        window = self.business_window()

        if not 0 < self.heavy_booking_ratio <= 1:
            raise ConfigurationError(
                f"AVAILABILITY_HEAVY_BOOKING_RATIO must be in (0, 1], got {self.heavy_booking_ratio}"
            )
        if self.heavy_booking_count <= 0:
            raise ConfigurationError(
                f"AVAILABILITY_HEAVY_BOOKING_COUNT must be positive, got {self.heavy_booking_count}"
            )
        if self.max_suggestions < 0:
            raise ConfigurationError(
                f"AVAILABILITY_MAX_SUGGESTIONS must not be negative, got {self.max_suggestions}"
            )

        if self.dev_mode:
            warnings.append("DEV_MODE is on: business hours are ignored (00:00-24:00).")

        if window.total_minutes % window.granularity_minutes:
            warnings.append(
                f"Business window of {window.total_minutes} min is not a multiple of "
                f"the {window.granularity_minutes} min granularity; the last step is partial."
            )

        if window.default_duration_minutes > window.total_minutes:
            warnings.append(
                "Default duration is longer than the business window; no slots can be suggested."
            )

        return warnings


def configure_logging(level: str | None = None) -> None:
    """Install a root handler. Applications call this; the library never does."""
    logging.basicConfig(level=(level or settings.log_level).upper(), format=LOG_FORMAT)
    log.debug("Logging configured at %s", logging.getLevelName(logging.getLogger().level))


settings = Settings()
