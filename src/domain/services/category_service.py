"""Category service layer with business logic."""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import CategoriesAlreadyExistError, CategoryNotFoundError
from domain.entities.category import DEFAULT_CATEGORIES, Category, CategoryColor
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class CategoryService:
    """Service layer for Category business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all_for_user(self, user_id: UUID) -> list[Category]:
        """Get all categories for a user in creation order."""
        async with self._uow_factory() as uow:
            return await uow.categories.get_all_for_user(user_id)  # type: ignore[no-any-return]

    async def get_by_id(self, category_id: UUID, user_id: UUID) -> Category:
        """Get a specific category, ensuring ownership."""
        async with self._uow_factory() as uow:
            category = await uow.categories.get(category_id)
            if not category or category.user_id != user_id:
                raise CategoryNotFoundError(str(category_id))
            return category

    async def create(
        self,
        user_id: UUID,
        name: str,
        icon: str,
        color: CategoryColor,
    ) -> Category:
        """Create a new category."""
        async with self._uow_factory() as uow:
            category = Category(user_id=user_id, name=name, icon=icon, color=color)
            created = await uow.categories.create(category)
            await uow.commit()

        logger.info("category_created", category_id=str(created.id))
        return created

    async def seed_defaults(self, user_id: UUID) -> list[Category]:
        """Create the starter categories for an account that has none."""
        async with self._uow_factory() as uow:
            existing = await uow.categories.count_for_user(user_id)
            if existing:
                raise CategoriesAlreadyExistError(existing)

            created = [
                await uow.categories.create(
                    Category(user_id=user_id, name=name, icon=icon, color=color)
                )
                for name, icon, color in DEFAULT_CATEGORIES
            ]
            await uow.commit()

        logger.info("default_categories_seeded", count=len(created))
        return created

    async def update(
        self,
        category_id: UUID,
        user_id: UUID,
        name: str | None = None,
        icon: str | None = None,
        color: CategoryColor | None = None,
    ) -> Category:
        """Update an existing category."""
        async with self._uow_factory() as uow:
            category = await uow.categories.get(category_id)
            if not category or category.user_id != user_id:
                raise CategoryNotFoundError(str(category_id))

            if name:
                category.name = name
            if icon:
                category.icon = icon
            if color:
                category.color = CategoryColor(color)

            updated = await uow.categories.update(category)
            await uow.commit()
            return updated

    async def delete(self, category_id: UUID, user_id: UUID) -> int:
        """Delete a category together with all its entries.

        Returns the number of entries removed with it.
        """
        async with self._uow_factory() as uow:
            category = await uow.categories.get(category_id)
            if not category or category.user_id != user_id:
                raise CategoryNotFoundError(str(category_id))

            removed_entries = await uow.entries.delete_for_category(category_id)
            await uow.categories.delete(category_id)
            await uow.commit()

        logger.info(
            "category_deleted",
            category_id=str(category_id),
            removed_entries=removed_entries,
        )
        return removed_entries  # type: ignore[no-any-return]
