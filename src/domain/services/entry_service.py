"""Entry service layer with business logic."""

from collections.abc import Callable
from datetime import date, datetime, tzinfo
from uuid import UUID

import structlog

from core.exceptions import CategoryNotFoundError, EntryNotFoundError
from domain.calendar.dates import civil_noon, day_bounds_utc
from domain.entities.entry import Entry
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.calendar_service import representable

logger = structlog.get_logger()


class EntryService:
    """Service layer for journal entry business logic."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        clock: Callable[[], datetime] = datetime.utcnow,
    ) -> None:
        self._uow_factory = uow_factory
        self._clock = clock

    async def get_all_for_user(
        self,
        user_id: UUID,
        tag: str | None = None,
        start: date | None = None,
        end: date | None = None,
        tz: tzinfo | None = None,
    ) -> list[Entry]:
        """Get a user's entries newest-first, optionally filtered by tag and local date range."""
        lower: datetime | None = None
        upper: datetime | None = None
        if start:
            with representable(start):
                lower = day_bounds_utc(start, start, tz)[0]
        if end:
            with representable(end):
                upper = day_bounds_utc(end, end, tz)[1]

        async with self._uow_factory() as uow:
            entries = await uow.entries.get_all_for_user(user_id, start=lower, end=upper)

        if tag:
            entries = [entry for entry in entries if entry.has_tag(tag)]
        return entries

    async def get_by_id(self, entry_id: UUID, user_id: UUID) -> Entry:
        """Get a specific entry, ensuring ownership."""
        async with self._uow_factory() as uow:
            entry = await uow.entries.get(entry_id)
            if not entry or entry.user_id != user_id:
                raise EntryNotFoundError(str(entry_id))
            return entry

    async def create(
        self,
        user_id: UUID,
        text: str,
        category_id: UUID,
        day: date | None = None,
        tz: tzinfo | None = None,
    ) -> Entry:
        """Create an entry. A chosen ``day`` files it at noon local time on that date."""
        created_at = self._filed_at(day, tz) if day else self._clock()
        async with self._uow_factory() as uow:
            await self._require_category(uow, category_id, user_id)

            entry = Entry(
                user_id=user_id,
                category_id=category_id,
                text=text,
                created_at=created_at,
            )
            created = await uow.entries.create(entry)
            await uow.commit()

        logger.info("entry_created", entry_id=str(created.id), tag_count=len(created.tags))
        return created

    async def update(
        self,
        entry_id: UUID,
        user_id: UUID,
        text: str,
        category_id: UUID,
        day: date | None = None,
        tz: tzinfo | None = None,
    ) -> Entry:
        """Replace an entry's text, category and (optionally) date; tags are recomputed."""
        async with self._uow_factory() as uow:
            entry = await uow.entries.get(entry_id)
            if not entry or entry.user_id != user_id:
                raise EntryNotFoundError(str(entry_id))

            if category_id != entry.category_id:
                await self._require_category(uow, category_id, user_id)

            entry = entry.revise(
                text=text,
                category_id=category_id,
                created_at=self._filed_at(day, tz) if day else entry.created_at,
            )
            updated = await uow.entries.update(entry)
            await uow.commit()

        logger.info("entry_updated", entry_id=str(entry_id))
        return updated

    async def delete(self, entry_id: UUID, user_id: UUID) -> bool:
        """Delete an entry."""
        async with self._uow_factory() as uow:
            entry = await uow.entries.get(entry_id)
            if not entry or entry.user_id != user_id:
                raise EntryNotFoundError(str(entry_id))

            deleted = await uow.entries.delete(entry_id)
            await uow.commit()

        logger.info("entry_deleted", entry_id=str(entry_id))
        return deleted  # type: ignore[no-any-return]

    async def clear_history(self, user_id: UUID) -> int:
        """Delete every entry of the user; categories and reports are kept."""
        async with self._uow_factory() as uow:
            removed = await uow.entries.delete_all_for_user(user_id)
            await uow.commit()

        logger.info("entry_history_cleared", removed=removed)
        return removed  # type: ignore[no-any-return]

    @staticmethod
    def _filed_at(day: date, tz: tzinfo | None) -> datetime:
        with representable(day):
            return civil_noon(day, tz)

    async def _require_category(self, uow: IUnitOfWork, category_id: UUID, user_id: UUID) -> None:
        """Entries may only reference the user's own categories."""
        category = await uow.categories.get(category_id)
        if not category or category.user_id != user_id:
            raise CategoryNotFoundError(str(category_id))
