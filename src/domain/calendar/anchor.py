"""One-shot initial scroll that brings "today" into view."""

from collections.abc import Callable, Sequence
from datetime import date
from typing import Protocol

from domain.calendar.config import DEFAULT_CALENDAR_CONFIG
from domain.calendar.scroll import Viewport


class Cancellable(Protocol):
    def cancel(self) -> object: ...


class TimerScheduler(Protocol):
    """Delayed-callback source; ``asyncio.AbstractEventLoop`` satisfies it."""

    def call_later(self, delay: float, callback: Callable[[], object]) -> Cancellable: ...


# Returns the pixel offset of a day's element inside the container, or None if absent
DayLocator = Callable[[date], float | None]


class InitialAnchorScroller:
    """Scrolls the container so ``today`` sits ``offset_px`` below the top.

    The scroll is deferred by ``delay_ms`` so the first layout can settle, and
    happens at most once per view. If today's element cannot be found the
    scroll is skipped and retried on the next render.
    """

    def __init__(
        self,
        viewport: Viewport,
        locate: DayLocator,
        timers: TimerScheduler,
        today: date,
        offset_px: float = DEFAULT_CALENDAR_CONFIG.anchor_offset_px,
        delay_ms: float = DEFAULT_CALENDAR_CONFIG.initial_scroll_delay_ms,
    ) -> None:
        self._viewport = viewport
        self._locate = locate
        self._timers = timers
        self._today = today
        self._offset = offset_px
        self._delay = delay_ms / 1000
        self._pending: Cancellable | None = None
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def on_render(self, days: Sequence[date]) -> None:
        """Arm the deferred scroll after a render of a non-empty window."""
        if self._done or not days:
            return
        self._cancel()
        self._pending = self._timers.call_later(self._delay, self._scroll)

    def unmount(self) -> None:
        """Drop a scroll that has not fired yet."""
        self._cancel()

    def _scroll(self) -> None:
        self._pending = None
        if self._done:
            return
        offset = self._locate(self._today)
        if offset is None:
            return
        self._viewport.scroll_top = offset - self._offset
        self._done = True

    def _cancel(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
