"""Unit tests for CategoryService with mocked repositories."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from sharehub.core.errors import ConflictError, NotFoundError
from sharehub.modules.categories.services import CategoryService


pytestmark = pytest.mark.unit


@pytest.fixture
def service() -> CategoryService:
    service = CategoryService(AsyncMock())
    service.repo = AsyncMock()
    service.resources = AsyncMock()
    return service


class TestCreate:
    async def test_duplicate_ignoring_case(self, service: CategoryService):
        service.repo.get_by_name.return_value = SimpleNamespace(id=1, name="Safety")

        with pytest.raises(ConflictError):
            await service.create_category("SAFETY")

        service.repo.create.assert_not_awaited()

    async def test_creates(self, service: CategoryService):
        service.repo.get_by_name.return_value = None
        service.repo.create.side_effect = lambda category: SimpleNamespace(
            id=5, name=category.name
        )

        category = await service.create_category("Onboarding")

        assert category.name == "Onboarding"


class TestDelete:
    async def test_in_use_conflicts_and_keeps_category(self, service: CategoryService):
        service.repo.get_by_id.return_value = SimpleNamespace(id=4, name="Safety")
        service.resources.count_in_category.return_value = 3

        with pytest.raises(ConflictError) as exc_info:
            await service.delete_category("4")

        assert exc_info.value.message == "category in use"
        service.repo.delete.assert_not_awaited()

    async def test_unused_is_deleted(self, service: CategoryService):
        category = SimpleNamespace(id=4, name="Safety")
        service.repo.get_by_id.return_value = category
        service.resources.count_in_category.return_value = 0

        await service.delete_category("4")

        service.repo.delete.assert_awaited_once_with(category)

    async def test_unknown(self, service: CategoryService):
        service.repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await service.delete_category("4")
