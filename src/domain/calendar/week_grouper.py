"""Partition a day window into week sections."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from domain.calendar.config import DAYS_PER_WEEK


@dataclass(frozen=True, slots=True)
class Week:
    """One section of consecutive days, rendered under a single header."""

    days: tuple[date, ...]

    @property
    def start(self) -> date:
        return self.days[0]

    @property
    def end(self) -> date:
        return self.days[-1]


def group_weeks(days: Sequence[date], size: int = DAYS_PER_WEEK) -> list[Week]:
    """Split ``days`` into consecutive chunks of ``size``; only the last may be shorter."""
    if size <= 0:
        raise ValueError("size must be positive")
    return [Week(tuple(days[i : i + size])) for i in range(0, len(days), size)]
