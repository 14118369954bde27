"""Unit tests for CategoryService."""

from uuid import UUID, uuid4

import pytest

from core.exceptions import CategoriesAlreadyExistError, CategoryNotFoundError
from domain.entities.category import DEFAULT_CATEGORIES, Category, CategoryColor
from domain.services.category_service import CategoryService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> CategoryService:
    return CategoryService(lambda: uow)


class TestCreate:
    @pytest.mark.asyncio
    async def test_creates_category(self, service: CategoryService, uow: FakeUnitOfWork, user_id: UUID):
        uow.categories.create.side_effect = lambda c: c

        result = await service.create(user_id, "Travel", "Map", CategoryColor.TEAL)

        assert result.name == "Travel"
        assert result.color is CategoryColor.TEAL
        assert uow.committed


class TestSeedDefaults:
    @pytest.mark.asyncio
    async def test_seeds_six_defaults(self, service: CategoryService, uow: FakeUnitOfWork, user_id: UUID):
        uow.categories.count_for_user.return_value = 0

        async def create(category: Category) -> Category:
            return category

        uow.categories.create.side_effect = create

        result = await service.seed_defaults(user_id)

        assert [c.name for c in result] == [name for name, _, _ in DEFAULT_CATEGORIES]
        assert result[0].icon == "Briefcase"
        assert all(c.user_id == user_id for c in result)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_refuses_when_categories_exist(
        self, service: CategoryService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.categories.count_for_user.return_value = 2

        with pytest.raises(CategoriesAlreadyExistError) as exc_info:
            await service.seed_defaults(user_id)

        assert exc_info.value.status_code == 409
        uow.categories.create.assert_not_called()


class TestUpdate:
    @pytest.mark.asyncio
    async def test_updates_only_given_fields(
        self, service: CategoryService, uow: FakeUnitOfWork, user_id: UUID
    ):
        category = Category(user_id=user_id, name="Work", icon="Briefcase", color=CategoryColor.BLUE)
        uow.categories.get.return_value = category
        uow.categories.update.side_effect = lambda c: c

        result = await service.update(category.id, user_id, color=CategoryColor.PINK)

        assert result.name == "Work"
        assert result.color is CategoryColor.PINK
        assert uow.committed

    @pytest.mark.asyncio
    async def test_raises_not_found_for_wrong_user(
        self, service: CategoryService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.categories.get.return_value = Category(user_id=uuid4(), name="Other")

        with pytest.raises(CategoryNotFoundError):
            await service.update(uuid4(), user_id, name="Mine")


class TestDelete:
    @pytest.mark.asyncio
    async def test_cascades_to_entries_in_one_unit_of_work(
        self, service: CategoryService, uow: FakeUnitOfWork, user_id: UUID
    ):
        category = Category(user_id=user_id, name="Work")
        uow.categories.get.return_value = category
        uow.entries.delete_for_category.return_value = 4

        removed = await service.delete(category.id, user_id)

        assert removed == 4
        uow.entries.delete_for_category.assert_called_once_with(category.id)
        uow.categories.delete.assert_called_once_with(category.id)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_missing_category(self, service: CategoryService, uow: FakeUnitOfWork, user_id: UUID):
        uow.categories.get.return_value = None

        with pytest.raises(CategoryNotFoundError):
            await service.delete(uuid4(), user_id)

        uow.entries.delete_for_category.assert_not_called()
