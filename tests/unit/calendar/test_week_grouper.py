"""Tests for week grouping."""

from datetime import date

import pytest

from domain.calendar.dates import date_range
from domain.calendar.day_window import initial_window
from domain.calendar.week_grouper import group_weeks


class TestGroupWeeks:
    def test_initial_window_is_24_monday_weeks(self):
        weeks = group_weeks(initial_window(date(2024, 1, 17)))

        assert len(weeks) == 24
        assert all(len(week.days) == 7 for week in weeks)
        assert all(week.start.weekday() == 0 for week in weeks)
        assert all(week.end.weekday() == 6 for week in weeks)

    def test_concatenation_restores_input(self):
        days = date_range(date(2024, 1, 1), 30)

        weeks = group_weeks(days)

        assert [d for week in weeks for d in week.days] == days

    def test_only_last_chunk_may_be_short(self):
        weeks = group_weeks(date_range(date(2024, 1, 1), 10))

        assert [len(w.days) for w in weeks] == [7, 3]

    def test_empty_input(self):
        assert group_weeks([]) == []

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValueError):
            group_weeks(date_range(date(2024, 1, 1), 7), size=0)
