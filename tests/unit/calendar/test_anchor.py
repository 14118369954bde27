"""Tests for the one-shot initial scroll to today."""

from datetime import date

from domain.calendar.anchor import InitialAnchorScroller
from tests.unit.calendar.fakes import FakeLocator, FakeTimers, FakeViewport

TODAY = date(2024, 1, 17)
DAYS = [TODAY]


def make_scroller(offsets=None):
    viewport = FakeViewport(scroll_top=0)
    timers = FakeTimers()
    locator = FakeLocator(offsets if offsets is not None else {TODAY: 5000.0})
    scroller = InitialAnchorScroller(viewport, locator, timers, TODAY)
    return scroller, viewport, timers, locator


class TestInitialAnchorScroller:
    def test_scrolls_today_below_top_after_delay(self):
        scroller, viewport, timers, _ = make_scroller()

        scroller.on_render(DAYS)

        assert timers.active[0].delay == 0.15
        assert viewport.scroll_top == 0

        timers.fire_all()

        assert viewport.scroll_top == 4920
        assert scroller.done

    def test_runs_at_most_once(self):
        scroller, viewport, timers, _ = make_scroller()
        scroller.on_render(DAYS)
        timers.fire_all()
        viewport.scroll_top = 123

        scroller.on_render(DAYS)
        timers.fire_all()

        assert viewport.scroll_top == 123
        assert timers.active == []

    def test_rerender_replaces_pending_timer(self):
        scroller, _, timers, _ = make_scroller()

        scroller.on_render(DAYS)
        scroller.on_render(DAYS)

        assert len(timers.handles) == 2
        assert timers.handles[0].cancelled
        assert len(timers.active) == 1

    def test_missing_today_is_skipped_and_retried(self):
        scroller, viewport, timers, locator = make_scroller(offsets={})

        scroller.on_render(DAYS)
        timers.fire_all()

        assert viewport.scroll_top == 0
        assert not scroller.done

        locator.offsets[TODAY] = 400.0
        scroller.on_render(DAYS)
        timers.fire_all()

        assert viewport.scroll_top == 320
        assert scroller.done

    def test_empty_render_does_not_arm(self):
        scroller, _, timers, _ = make_scroller()

        scroller.on_render([])

        assert timers.handles == []
        assert not scroller.pending

    def test_unmount_cancels_pending_scroll(self):
        scroller, viewport, timers, locator = make_scroller()
        scroller.on_render(DAYS)

        scroller.unmount()
        timers.fire_all()

        assert locator.calls == []
        assert viewport.scroll_top == 0
        assert not scroller.pending
