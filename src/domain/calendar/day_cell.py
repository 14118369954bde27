"""Render a single calendar day into a view model."""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from domain.entities.category import FALLBACK_COLOR, FALLBACK_ICON, Category
from domain.entities.entry import Entry

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass(frozen=True, slots=True)
class TextToken:
    text: str
    is_tag: bool


def tokenize(text: str) -> list[TextToken]:
    """Split entry text on spaces, flagging words that start with ``#``."""
    return [TextToken(word, word.startswith("#")) for word in text.split(" ")]


@dataclass(frozen=True, slots=True)
class DayHeader:
    weekday: str
    day: int
    month: str
    year: int
    is_today: bool

    @property
    def title(self) -> str:
        return f"{self.weekday}, {self.day} {self.month}"


@dataclass(frozen=True, slots=True)
class EntryCard:
    entry: Entry
    category_name: str | None
    icon: str
    color: str
    tokens: tuple[TextToken, ...]
    actions: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class DayCell:
    day: date
    header: DayHeader
    cards: tuple[EntryCard, ...]

    @property
    def is_empty(self) -> bool:
        return not self.cards


class DayCellRenderer:
    """Builds day cells from a category snapshot and raises edit/delete intents.

    The renderer never changes entries itself: ``request_edit`` and
    ``request_delete`` hand the intent to the owner of the entry collection,
    which applies it and supplies a new snapshot.
    """

    def __init__(
        self,
        categories: Iterable[Category],
        today: date,
        on_edit: Callable[[Entry], None] | None = None,
        on_delete: Callable[[UUID], None] | None = None,
        confirm: Callable[[UUID], bool] | None = None,
    ) -> None:
        self._categories = {category.id: category for category in categories}
        self._today = today
        self._on_edit = on_edit
        self._on_delete = on_delete
        self._confirm = confirm
        actions = []
        if on_edit is not None:
            actions.append("edit")
        if on_delete is not None:
            actions.append("delete")
        self._actions = tuple(actions)

    def header(self, day: date) -> DayHeader:
        return DayHeader(
            weekday=WEEKDAYS[day.weekday()],
            day=day.day,
            month=MONTHS[day.month - 1],
            year=day.year,
            is_today=day == self._today,
        )

    def card(self, entry: Entry) -> EntryCard:
        category = self._categories.get(entry.category_id)
        return EntryCard(
            entry=entry,
            category_name=category.name if category else None,
            icon=category.icon if category else FALLBACK_ICON,
            color=category.color.value if category else FALLBACK_COLOR,
            tokens=tuple(tokenize(entry.text)),
            actions=self._actions,
        )

    def render(self, day: date, entries: Sequence[Entry]) -> DayCell:
        return DayCell(
            day=day,
            header=self.header(day),
            cards=tuple(self.card(entry) for entry in entries),
        )

    def request_edit(self, entry: Entry) -> bool:
        """Ask the owner to open the editor for ``entry``."""
        if self._on_edit is None:
            return False
        self._on_edit(entry)
        return True

    def request_delete(self, entry_id: UUID) -> bool:
        """Ask the owner to delete an entry once the user confirms."""
        if self._on_delete is None:
            return False
        if self._confirm is not None and not self._confirm(entry_id):
            return False
        self._on_delete(entry_id)
        return True
