"""The contiguous, lazily extended window of calendar days."""

from datetime import date, timedelta
from enum import StrEnum

from domain.calendar.config import DAYS_PER_WEEK, DEFAULT_CALENDAR_CONFIG, CalendarConfig
from domain.calendar.dates import date_range, days_after, days_before, monday_of


class WindowState(StrEnum):
    """Extension state machine. Transitions only ever leave ``IDLE``."""

    IDLE = "idle"
    EXTENDING_PAST = "extending_past"
    EXTENDING_FUTURE = "extending_future"


def initial_window(today: date, config: CalendarConfig = DEFAULT_CALENDAR_CONFIG) -> list[date]:
    """First window for a view: starts ``weeks_back`` weeks before this Monday."""
    start = monday_of(today) - timedelta(days=config.weeks_back * DAYS_PER_WEEK)
    return date_range(start, config.initial_days)


class DayWindowManager:
    """Owns the ordered sequence of dates materialized by one calendar view.

    The window only grows, only at its ends, and never has gaps or duplicates.
    An extension moves the manager out of ``IDLE`` until :meth:`settle` is
    called; requests made in between are dropped, so a burst of scroll events
    extends the window once.
    """

    def __init__(self, config: CalendarConfig = DEFAULT_CALENDAR_CONFIG) -> None:
        self._config = config
        self._days: list[date] = []
        self._state = WindowState.IDLE
        self._initialized = False

    @property
    def days(self) -> tuple[date, ...]:
        return tuple(self._days)

    @property
    def state(self) -> WindowState:
        return self._state

    @property
    def in_flight(self) -> bool:
        return self._state is not WindowState.IDLE

    @property
    def first(self) -> date | None:
        return self._days[0] if self._days else None

    @property
    def last(self) -> date | None:
        return self._days[-1] if self._days else None

    def __len__(self) -> int:
        return len(self._days)

    def __contains__(self, day: object) -> bool:
        if not self._days or not isinstance(day, date):
            return False
        return self._days[0] <= day <= self._days[-1]

    def initialize(self, today: date) -> list[date]:
        """Populate the initial window around ``today``. Allowed once per view."""
        if self._initialized:
            raise RuntimeError("DayWindowManager already initialized for this view")
        self._days = initial_window(today, self._config)
        self._initialized = True
        return list(self._days)

    def extend_past(self) -> list[date]:
        """Prepend ``extension_days`` dates; returns them, or ``[]`` if dropped."""
        if not self._accepts_extension():
            return []
        try:
            added = days_before(self._days[0], self._config.extension_days)
        except OverflowError:
            # The window already reaches date.min
            return []
        self._state = WindowState.EXTENDING_PAST
        self._days[:0] = added
        return added

    def extend_future(self) -> list[date]:
        """Append ``extension_days`` dates; returns them, or ``[]`` if dropped."""
        if not self._accepts_extension():
            return []
        try:
            added = days_after(self._days[-1], self._config.extension_days)
        except OverflowError:
            return []
        self._state = WindowState.EXTENDING_FUTURE
        self._days.extend(added)
        return added

    def settle(self) -> None:
        """Finish the in-flight extension and accept new requests."""
        self._state = WindowState.IDLE

    def _accepts_extension(self) -> bool:
        return self._state is WindowState.IDLE and bool(self._days)
