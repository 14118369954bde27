"""SQLAlchemy implementation of Category repository."""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.category import Category, CategoryColor
from infrastructure.database.models import CategoryModel


class SQLAlchemyCategoryRepository:
    """SQLAlchemy implementation of ICategoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Category | None:
        """Get a category by ID."""
        stmt = select(CategoryModel).where(CategoryModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all_for_user(self, user_id: UUID) -> list[Category]:
        """Get all categories for a user in creation order."""
        stmt = (
            select(CategoryModel)
            .where(CategoryModel.user_id == user_id)
            .order_by(CategoryModel.created_at, CategoryModel.name)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def count_for_user(self, user_id: UUID) -> int:
        """Count a user's categories."""
        stmt = select(func.count()).select_from(CategoryModel).where(CategoryModel.user_id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar() or 0

    async def create(self, category: Category) -> Category:
        """Create a new category."""
        model = self._to_model(category)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, category: Category) -> Category:
        """Update an existing category."""
        stmt = select(CategoryModel).where(CategoryModel.id == category.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Category {category.id} not found")

        model.name = category.name
        model.icon = category.icon
        model.color = category.color.value

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a category."""
        stmt = select(CategoryModel).where(CategoryModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: CategoryModel) -> Category:
        """Convert ORM model to domain entity."""
        return Category(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            icon=model.icon,
            color=CategoryColor(model.color),
            created_at=model.created_at,
        )

    def _to_model(self, entity: Category) -> CategoryModel:
        """Convert domain entity to ORM model."""
        return CategoryModel(
            id=entity.id,
            user_id=entity.user_id,
            name=entity.name,
            icon=entity.icon,
            color=entity.color.value,
            created_at=entity.created_at,
        )
