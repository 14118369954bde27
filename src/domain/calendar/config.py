"""Calendar view configuration."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.config import Settings

DAYS_PER_WEEK = 7


@dataclass(frozen=True, slots=True)
class CalendarConfig:
    """Tunable constants of the infinite calendar.

    The defaults are the values clients already depend on; change them through
    settings rather than here.
    """

    initial_days: int = 168
    weeks_back: int = 8
    extension_days: int = 28
    scroll_threshold_px: int = 600
    anchor_offset_px: int = 80
    initial_scroll_delay_ms: int = 150

    def __post_init__(self) -> None:
        # Week grouping relies on whole weeks at both ends of the window
        for name in ("initial_days", "extension_days"):
            value = getattr(self, name)
            if value <= 0 or value % DAYS_PER_WEEK:
                raise ValueError(f"{name} must be a positive multiple of {DAYS_PER_WEEK}, got {value}")
        if self.weeks_back * DAYS_PER_WEEK >= self.initial_days:
            raise ValueError("weeks_back must leave the current week inside the initial window")

    @property
    def initial_scroll_delay_seconds(self) -> float:
        return self.initial_scroll_delay_ms / 1000

    @classmethod
    def from_settings(cls, settings: "Settings") -> "CalendarConfig":
        """Build the config from application settings."""
        return cls(
            initial_days=settings.calendar_initial_days,
            weeks_back=settings.calendar_weeks_back,
            extension_days=settings.calendar_extension_days,
            scroll_threshold_px=settings.calendar_scroll_threshold_px,
            anchor_offset_px=settings.calendar_anchor_offset_px,
            initial_scroll_delay_ms=settings.calendar_initial_scroll_delay_ms,
        )


DEFAULT_CALENDAR_CONFIG = CalendarConfig()
