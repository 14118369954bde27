"""Tests for day cell rendering and entry intents."""

from datetime import date, datetime
from uuid import uuid4

from domain.calendar.day_cell import DayCellRenderer, tokenize
from domain.entities.category import FALLBACK_COLOR, FALLBACK_ICON, Category, CategoryColor
from domain.entities.entry import Entry

USER = uuid4()
DAY = date(2024, 1, 17)


def make_category() -> Category:
    return Category(user_id=USER, name="Health", icon="Heart", color=CategoryColor.RED)


def make_entry(category_id, text="Run #health") -> Entry:
    return Entry(user_id=USER, category_id=category_id, text=text, created_at=datetime(2024, 1, 17, 8))


class TestTokenize:
    def test_marks_hash_words(self):
        tokens = tokenize("Long walk #health today")

        assert [t.text for t in tokens] == ["Long", "walk", "#health", "today"]
        assert [t.is_tag for t in tokens] == [False, False, True, False]

    def test_splits_on_single_spaces_only(self):
        assert [t.text for t in tokenize("a  b")] == ["a", "", "b"]


class TestHeader:
    def test_formats_title_and_flags_today(self):
        renderer = DayCellRenderer([], today=DAY)

        header = renderer.header(DAY)

        assert header.title == "Wednesday, 17 Jan"
        assert header.year == 2024
        assert header.is_today
        assert not renderer.header(date(2024, 1, 18)).is_today


class TestRender:
    def test_empty_day(self):
        cell = DayCellRenderer([], today=DAY).render(DAY, ())

        assert cell.is_empty
        assert cell.cards == ()

    def test_card_uses_category_visuals(self):
        category = make_category()
        entry = make_entry(category.id)

        cell = DayCellRenderer([category], today=DAY).render(DAY, [entry])

        card = cell.cards[0]
        assert card.category_name == "Health"
        assert card.icon == "Heart"
        assert card.color == "red"
        assert [t.is_tag for t in card.tokens] == [False, True]

    def test_unknown_category_falls_back(self):
        card = DayCellRenderer([], today=DAY).card(make_entry(uuid4()))

        assert card.category_name is None
        assert card.icon == FALLBACK_ICON
        assert card.color == FALLBACK_COLOR

    def test_preserves_entry_order(self):
        category = make_category()
        entries = [make_entry(category.id, text=str(i)) for i in range(3)]

        cell = DayCellRenderer([category], today=DAY).render(DAY, entries)

        assert [c.entry.text for c in cell.cards] == ["0", "1", "2"]


class TestIntents:
    def test_actions_follow_callbacks(self):
        assert DayCellRenderer([], DAY).card(make_entry(uuid4())).actions == ()

        renderer = DayCellRenderer([], DAY, on_edit=lambda e: None, on_delete=lambda i: None)
        assert renderer.card(make_entry(uuid4())).actions == ("edit", "delete")

    def test_edit_passes_entry_to_owner(self):
        edited = []
        renderer = DayCellRenderer([], DAY, on_edit=edited.append)
        entry = make_entry(uuid4())

        assert renderer.request_edit(entry)
        assert edited == [entry]

    def test_delete_requires_confirmation(self):
        deleted = []
        entry_id = uuid4()
        renderer = DayCellRenderer([], DAY, on_delete=deleted.append, confirm=lambda _: False)

        assert not renderer.request_delete(entry_id)
        assert deleted == []

    def test_confirmed_delete_reaches_owner(self):
        deleted = []
        entry_id = uuid4()
        renderer = DayCellRenderer([], DAY, on_delete=deleted.append, confirm=lambda _: True)

        assert renderer.request_delete(entry_id)
        assert deleted == [entry_id]

    def test_without_callbacks_nothing_happens(self):
        renderer = DayCellRenderer([], DAY)

        assert not renderer.request_edit(make_entry(uuid4()))
        assert not renderer.request_delete(uuid4())
