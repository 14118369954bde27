"""Journal entry domain entity."""

import re
from dataclasses import dataclass, field, replace
from datetime import datetime
from uuid import UUID, uuid4

# JS-style \w (ASCII only) plus the Cyrillic block
TAG_PATTERN = re.compile(r"#[A-Za-z0-9_Ѐ-ӿ]+")


def extract_tags(text: str) -> tuple[str, ...]:
    """Extract ``#tag`` tokens from text, in order of appearance."""
    return tuple(TAG_PATTERN.findall(text))


@dataclass(frozen=True)
class Entry:
    """Domain entity for a journal entry (a "moment").

    Immutable. ``tags`` is derived from ``text`` on construction and cannot be
    passed in; :meth:`revise` returns an edited copy with the tags recomputed.
    """

    user_id: UUID
    category_id: UUID
    text: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)
    tags: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", extract_tags(self.text))

    def revise(self, text: str, category_id: UUID, created_at: datetime) -> "Entry":
        """Replace text, category and timestamp as one edit."""
        return replace(self, text=text, category_id=category_id, created_at=created_at)

    def has_tag(self, tag: str) -> bool:
        """Case-insensitive tag membership; the leading ``#`` is optional."""
        wanted = tag if tag.startswith("#") else f"#{tag}"
        return wanted.casefold() in (t.casefold() for t in self.tags)
