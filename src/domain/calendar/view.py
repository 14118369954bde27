"""One calendar view instance: window, index, grouping, scrolling and cells."""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import date, tzinfo
from uuid import UUID

from domain.calendar.anchor import DayLocator, InitialAnchorScroller, TimerScheduler
from domain.calendar.config import DEFAULT_CALENDAR_CONFIG, CalendarConfig
from domain.calendar.day_cell import DayCell, DayCellRenderer
from domain.calendar.day_window import DayWindowManager
from domain.calendar.entry_index import EMPTY_INDEX, EntryIndex, build_entry_index
from domain.calendar.scroll import ExtensionDirection, LayoutScheduler, ScrollCoordinator, Viewport
from domain.calendar.week_grouper import Week, group_weeks
from domain.entities.category import Category
from domain.entities.entry import Entry


@dataclass(frozen=True, slots=True)
class RenderedWeek:
    week: Week
    cells: tuple[DayCell, ...]


class CalendarView:
    """Infinite calendar state for a single mounted view.

    Entries and categories arrive as a snapshot through
    :meth:`replace_snapshot` and are never patched in place.
    """

    def __init__(
        self,
        viewport: Viewport,
        scheduler: LayoutScheduler,
        timers: TimerScheduler,
        locate: DayLocator,
        today: date,
        config: CalendarConfig = DEFAULT_CALENDAR_CONFIG,
        tz: tzinfo | None = None,
        on_edit: Callable[[Entry], None] | None = None,
        on_delete: Callable[[UUID], None] | None = None,
        confirm: Callable[[UUID], bool] | None = None,
    ) -> None:
        self.today = today
        self._tz = tz
        self._callbacks = (on_edit, on_delete, confirm)
        self.window = DayWindowManager(config)
        self.coordinator = ScrollCoordinator(
            self.window, viewport, scheduler, threshold_px=config.scroll_threshold_px
        )
        self.anchor = InitialAnchorScroller(
            viewport,
            locate,
            timers,
            today,
            offset_px=config.anchor_offset_px,
            delay_ms=config.initial_scroll_delay_ms,
        )
        self.index: EntryIndex = EMPTY_INDEX
        self.renderer = DayCellRenderer((), today, *self._callbacks)

    def mount(self) -> list[date]:
        days = self.window.initialize(self.today)
        self.anchor.on_render(days)
        return days

    def unmount(self) -> None:
        self.anchor.unmount()

    def replace_snapshot(self, entries: Iterable[Entry], categories: Iterable[Category]) -> None:
        self.index = build_entry_index(entries, self._tz)
        self.renderer = DayCellRenderer(categories, self.today, *self._callbacks)

    def weeks(self) -> list[RenderedWeek]:
        return render_weeks(self.window.days, self.index, self.renderer)

    def on_scroll(self) -> ExtensionDirection | None:
        direction = self.coordinator.on_scroll()
        if direction is not None:
            self.anchor.on_render(self.window.days)
        return direction


def render_weeks(
    days: Sequence[date], index: EntryIndex, renderer: DayCellRenderer
) -> list[RenderedWeek]:
    """Group ``days`` into weeks and render every cell from ``index``."""
    return [
        RenderedWeek(week, tuple(renderer.render(day, index.entries_for(day)) for day in week.days))
        for week in group_weeks(days)
    ]
