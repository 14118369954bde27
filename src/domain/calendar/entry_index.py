"""Date to entries lookup for the calendar."""

from collections.abc import Iterable, Mapping
from datetime import date, tzinfo
from types import MappingProxyType

from domain.calendar.dates import local_date
from domain.entities.entry import Entry


class EntryIndex:
    """Immutable mapping from civil date to the entries created on it.

    Within a day, entries keep the order of the source collection. Callers pass
    entries newest-first and the index never re-sorts them.
    """

    __slots__ = ("_by_day",)

    def __init__(self, by_day: Mapping[date, tuple[Entry, ...]]) -> None:
        self._by_day = MappingProxyType(dict(by_day))

    def entries_for(self, day: date) -> tuple[Entry, ...]:
        """Entries on ``day``; an empty tuple when there are none."""
        return self._by_day.get(day, ())

    def days(self) -> list[date]:
        """Days that have at least one entry, in ascending order."""
        return sorted(self._by_day)

    def __contains__(self, day: object) -> bool:
        return day in self._by_day

    def __len__(self) -> int:
        return len(self._by_day)


EMPTY_INDEX = EntryIndex({})


def build_entry_index(entries: Iterable[Entry], tz: tzinfo | None = None) -> EntryIndex:
    """Group entries by the civil date of ``created_at`` in ``tz``.

    Build this once per entry snapshot, not per rendered cell.
    """
    grouped: dict[date, list[Entry]] = {}
    for entry in entries:
        grouped.setdefault(local_date(entry.created_at, tz), []).append(entry)
    return EntryIndex({day: tuple(items) for day, items in grouped.items()})
