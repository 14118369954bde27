"""SQLAlchemy implementation of Entry repository."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.entry import Entry
from infrastructure.database.models import EntryModel


class SQLAlchemyEntryRepository:
    """SQLAlchemy implementation of IEntryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Entry | None:
        """Get an entry by ID."""
        stmt = select(EntryModel).where(EntryModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all_for_user(
        self,
        user_id: UUID,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[Entry]:
        """Get a user's entries newest-first, optionally bounded by created_at."""
        stmt = select(EntryModel).where(EntryModel.user_id == user_id)
        if start is not None:
            stmt = stmt.where(EntryModel.created_at >= start)
        if end is not None:
            stmt = stmt.where(EntryModel.created_at <= end)
        stmt = stmt.order_by(EntryModel.created_at.desc())

        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, entry: Entry) -> Entry:
        """Create a new entry."""
        model = self._to_model(entry)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, entry: Entry) -> Entry:
        """Update an existing entry."""
        stmt = select(EntryModel).where(EntryModel.id == entry.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Entry {entry.id} not found")

        model.text = entry.text
        model.tags = list(entry.tags)
        model.category_id = entry.category_id
        model.created_at = entry.created_at

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete an entry."""
        stmt = select(EntryModel).where(EntryModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every entry of a user."""
        stmt = delete(EntryModel).where(EntryModel.user_id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount or 0  # type: ignore[attr-defined]

    async def delete_for_category(self, category_id: UUID) -> int:
        """Delete every entry filed under a category."""
        stmt = delete(EntryModel).where(EntryModel.category_id == category_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount or 0  # type: ignore[attr-defined]

    def _to_entity(self, model: EntryModel) -> Entry:
        """Convert ORM model to domain entity. Tags are re-derived from the text."""
        return Entry(
            id=model.id,
            user_id=model.user_id,
            category_id=model.category_id,
            text=model.text,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Entry) -> EntryModel:
        """Convert domain entity to ORM model."""
        return EntryModel(
            id=entity.id,
            user_id=entity.user_id,
            category_id=entity.category_id,
            text=entity.text,
            tags=list(entity.tags),
            created_at=entity.created_at,
        )
