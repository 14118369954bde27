"""Category domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID, uuid4


class CategoryColor(StrEnum):
    """Fixed palette a category can be drawn in."""

    BLUE = "blue"
    GREEN = "green"
    RED = "red"
    PURPLE = "purple"
    YELLOW = "yellow"
    ORANGE = "orange"
    PINK = "pink"
    TEAL = "teal"
    INDIGO = "indigo"


ICON_LIBRARY: tuple[str, ...] = (
    "Briefcase",
    "Home",
    "Heart",
    "Lightbulb",
    "User",
    "Smile",
    "Star",
    "Coffee",
    "Cloud",
    "Moon",
    "Sun",
    "Book",
    "Camera",
    "Music",
    "Map",
    "Zap",
    "Target",
)

FALLBACK_ICON = "MessageCircle"
FALLBACK_COLOR = "slate"


@dataclass
class Category:
    """Domain entity for an entry category."""

    user_id: UUID
    name: str
    icon: str = ICON_LIBRARY[0]
    color: CategoryColor = CategoryColor.BLUE
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Coerce stored color strings back into the palette enum."""
        self.color = CategoryColor(self.color)


# (name, icon, color) seeded for new accounts
DEFAULT_CATEGORIES: tuple[tuple[str, str, CategoryColor], ...] = (
    ("Work", "Briefcase", CategoryColor.BLUE),
    ("Family", "Home", CategoryColor.GREEN),
    ("Health", "Heart", CategoryColor.RED),
    ("Ideas", "Lightbulb", CategoryColor.YELLOW),
    ("Personal", "User", CategoryColor.PURPLE),
    ("Mood", "Smile", CategoryColor.ORANGE),
)
