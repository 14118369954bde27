"""Prompt construction for AI journal reports."""

from collections.abc import Iterable, Mapping
from datetime import timezone, tzinfo
from uuid import UUID

from domain.entities.category import Category
from domain.entities.entry import Entry
from domain.entities.report import ReportPeriod

NO_ENTRIES_CONTENT = "No entries found for this period."
UNKNOWN_CATEGORY = "Unknown"

PROMPT_TEMPLATE = """\
Analyze the following journal entries and write a {adjective} report.
Answer in {language}, formatted as Markdown, with these sections:
1. **Overview**: a short summary of the key events and activities.
2. **Emotional background**: the emotional tone and mental state reflected in the entries.
3. **Patterns and insights**: recurring behaviours, habits, or links between actions and emotions.
4. **Recommendations**: 2-3 suggestions for more mindfulness or better wellbeing based on the observations.

Journal entries:
{entries}"""


def format_entries(
    entries: Iterable[Entry],
    categories: Mapping[UUID, Category],
    tz: tzinfo | None = None,
) -> str:
    """One line per entry: ``[HH:MM:SS][Category: name] text``."""
    lines = []
    for entry in entries:
        created = entry.created_at
        if tz is not None:
            created = created.replace(tzinfo=created.tzinfo or timezone.utc).astimezone(tz)
        category = categories.get(entry.category_id)
        name = category.name if category else UNKNOWN_CATEGORY
        lines.append(f"[{created:%H:%M:%S}][Category: {name}] {entry.text}")
    return "\n".join(lines)


def build_report_prompt(
    entries: Iterable[Entry],
    categories: Iterable[Category],
    period: ReportPeriod,
    language: str,
    tz: tzinfo | None = None,
) -> str:
    """Build the analysis prompt for ``entries`` over ``period``."""
    by_id = {category.id: category for category in categories}
    return PROMPT_TEMPLATE.format(
        adjective=period.adjective,
        language=language,
        entries=format_entries(entries, by_id, tz),
    )
