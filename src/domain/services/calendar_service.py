"""Calendar service: serves day windows rendered from the user's journal."""

from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date, tzinfo
from uuid import UUID

from core.exceptions import DateOutOfRangeError
from domain.calendar.config import DEFAULT_CALENDAR_CONFIG, CalendarConfig
from domain.calendar.dates import day_bounds_utc, days_after, days_before
from domain.calendar.day_cell import DayCell, DayCellRenderer
from domain.calendar.day_window import DayWindowManager
from domain.calendar.entry_index import build_entry_index
from domain.calendar.view import RenderedWeek, render_weeks
from domain.repositories.unit_of_work import IUnitOfWork


@contextmanager
def representable(first: date, last: date | None = None) -> Iterator[None]:
    """Report date arithmetic that runs past ``date.min``/``date.max`` as a client error."""
    try:
        yield
    except OverflowError as e:
        span = first.isoformat() if last in (None, first) else f"{first}..{last}"
        raise DateOutOfRangeError(span) from e


@dataclass(frozen=True)
class CalendarPage:
    """A contiguous run of rendered days, grouped into weeks."""

    today: date
    start: date
    end: date
    weeks: list[RenderedWeek]


class CalendarService:
    """Builds calendar pages for the HTTP surface.

    The browser owns the scroll state; each call renders one window: the
    initial one around today, or one extension step before or after a
    boundary date the client already has.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        config: CalendarConfig = DEFAULT_CALENDAR_CONFIG,
    ) -> None:
        self._uow_factory = uow_factory
        self._config = config

    @property
    def config(self) -> CalendarConfig:
        return self._config

    async def initial(self, user_id: UUID, today: date, tz: tzinfo | None = None) -> CalendarPage:
        """The first window of a view, anchored so today sits ``weeks_back`` weeks in."""
        window = DayWindowManager(self._config)
        with representable(today):
            days = window.initialize(today)
        return await self._render(user_id, days, today, tz)

    async def past(
        self, user_id: UUID, before: date, today: date, tz: tzinfo | None = None
    ) -> CalendarPage:
        """One extension step of days immediately preceding ``before``."""
        with representable(before):
            days = days_before(before, self._config.extension_days)
        return await self._render(user_id, days, today, tz)

    async def future(
        self, user_id: UUID, after: date, today: date, tz: tzinfo | None = None
    ) -> CalendarPage:
        """One extension step of days immediately following ``after``."""
        with representable(after):
            days = days_after(after, self._config.extension_days)
        return await self._render(user_id, days, today, tz)

    async def day(self, user_id: UUID, day: date, today: date, tz: tzinfo | None = None) -> DayCell:
        """A single rendered day."""
        page = await self._render(user_id, [day], today, tz)
        return page.weeks[0].cells[0]

    async def _render(
        self, user_id: UUID, days: Sequence[date], today: date, tz: tzinfo | None
    ) -> CalendarPage:
        with representable(days[0], days[-1]):
            start, end = day_bounds_utc(days[0], days[-1], tz)
        async with self._uow_factory() as uow:
            entries = await uow.entries.get_all_for_user(user_id, start=start, end=end)
            categories = await uow.categories.get_all_for_user(user_id)

        index = build_entry_index(entries, tz)
        renderer = DayCellRenderer(categories, today)
        return CalendarPage(
            today=today,
            start=days[0],
            end=days[-1],
            weeks=render_weeks(days, index, renderer),
        )
