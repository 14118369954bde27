"""Entry repository protocol."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from domain.entities.entry import Entry


class IEntryRepository(Protocol):
    """Repository interface for Entry entities."""

    async def get(self, id: UUID) -> Entry | None:
        """Get an entry by ID."""
        ...

    async def get_all_for_user(
        self,
        user_id: UUID,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[Entry]:
        """Get a user's entries newest-first, optionally bounded by created_at (UTC)."""
        ...

    async def create(self, entry: Entry) -> Entry:
        """Create a new entry."""
        ...

    async def update(self, entry: Entry) -> Entry:
        """Replace an existing entry's text, tags, category and timestamp."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete an entry and return success status."""
        ...

    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every entry of a user; returns how many were removed."""
        ...

    async def delete_for_category(self, category_id: UUID) -> int:
        """Delete every entry filed under a category; returns how many were removed."""
        ...
