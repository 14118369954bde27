"""Scroll-driven window extension with viewport anchor preservation."""

from collections import deque
from collections.abc import Callable
from enum import StrEnum
from typing import Protocol

import structlog

from domain.calendar.config import DEFAULT_CALENDAR_CONFIG
from domain.calendar.day_window import DayWindowManager

logger = structlog.get_logger()


class Viewport(Protocol):
    """Scrollable container the calendar is rendered into (pixel units)."""

    scroll_top: float

    @property
    def scroll_height(self) -> float: ...

    @property
    def client_height(self) -> float: ...


class LayoutScheduler(Protocol):
    """Runs a callback once the next layout pass has been applied."""

    def after_layout(self, callback: Callable[[], None]) -> None: ...


class DeferredLayoutQueue:
    """LayoutScheduler for hosts that lay out explicitly.

    Callbacks queue up until the host calls :meth:`flush` after re-rendering.
    """

    def __init__(self) -> None:
        self._pending: deque[Callable[[], None]] = deque()

    def after_layout(self, callback: Callable[[], None]) -> None:
        self._pending.append(callback)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def flush(self) -> int:
        """Run queued callbacks in order; returns how many ran."""
        ran = 0
        while self._pending:
            self._pending.popleft()()
            ran += 1
        return ran


class ExtensionDirection(StrEnum):
    PAST = "past"
    FUTURE = "future"


class ScrollCoordinator:
    """Turns scroll positions into window extensions.

    Prepending happens in two phases: the dates are inserted immediately, then
    after layout the scroll offset is shifted by the height the new content
    added, so whatever was on screen stays put. The window stays in flight
    until that correction runs.
    """

    def __init__(
        self,
        window: DayWindowManager,
        viewport: Viewport,
        scheduler: LayoutScheduler,
        threshold_px: float = DEFAULT_CALENDAR_CONFIG.scroll_threshold_px,
    ) -> None:
        self._window = window
        self._viewport = viewport
        self._scheduler = scheduler
        self._threshold = threshold_px

    def near_top(self) -> bool:
        return self._viewport.scroll_top <= self._threshold

    def near_bottom(self) -> bool:
        vp = self._viewport
        return vp.scroll_height - vp.scroll_top <= vp.client_height + self._threshold

    def on_scroll(self) -> ExtensionDirection | None:
        """Handle one scroll event; returns the extension it started, if any."""
        if not len(self._window):
            return None
        started: ExtensionDirection | None = None
        if self.near_top() and self._load_past():
            started = ExtensionDirection.PAST
        if self.near_bottom() and self._load_future():
            started = ExtensionDirection.FUTURE
        return started

    def _load_past(self) -> bool:
        if self._window.in_flight:
            return False
        previous_height = self._viewport.scroll_height
        previous_top = self._viewport.scroll_top

        added = self._window.extend_past()
        if not added:
            return False

        def compensate() -> None:
            delta = self._viewport.scroll_height - previous_height
            self._viewport.scroll_top = previous_top + delta
            self._window.settle()
            logger.debug("calendar_prepend_compensated", delta_px=delta, first_day=str(added[0]))

        self._scheduler.after_layout(compensate)
        return True

    def _load_future(self) -> bool:
        if self._window.in_flight:
            return False
        added = self._window.extend_future()
        # Content below the viewport does not move what is on screen
        self._window.settle()
        return bool(added)
