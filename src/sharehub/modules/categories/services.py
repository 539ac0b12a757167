"""Category service for business logic."""

from typing import Annotated

import structlog
from fastapi import Depends

from sharehub.api.dependencies import DBSession
from sharehub.core.errors import ConflictError, NotFoundError
from sharehub.core.permissions import ensure_category_unused
from sharehub.core.utils.parsing import parse_id
from sharehub.modules.categories.models import Category
from sharehub.modules.categories.repos import CategoryRepository
from sharehub.modules.resources.repos import ResourceRepository


logger = structlog.get_logger()


class CategoryService:
    """Service for the shared category taxonomy.

    Reading is open to everyone; creation and deletion are for
    administrators, which the routes enforce.
    """

    def __init__(self, db: DBSession) -> None:
        self.repo = CategoryRepository(db)
        self.resources = ResourceRepository(db)

    async def list_categories(self) -> list[Category]:
        return await self.repo.list_all()

    async def get_category(self, category_id: int) -> Category:
        """Get a category by ID.

        Raises:
            NotFoundError: If the category does not exist
        """
        category = await self.repo.get_by_id(category_id)
        if not category:
            raise NotFoundError(
                "Category not found",
                resource="category",
                resource_id=str(category_id),
            )
        return category

    async def create_category(self, name: str) -> Category:
        """Create a category.

        Args:
            name: Already trimmed, non-blank name

        Raises:
            ConflictError: If a category with the same name exists, ignoring case
        """
        existing = await self.repo.get_by_name(name)
        if existing:
            raise ConflictError(
                "Category already exists",
                error_code="category_exists",
                details={"name": existing.name},
            )

        category = await self.repo.create(Category(name=name))
        logger.info("category_created", category_id=category.id, name=category.name)
        return category

    async def delete_category(self, raw_id: str) -> None:
        """Delete a category that no resource references.

        Raises:
            ValidationError: If the identifier is malformed
            NotFoundError: If the category does not exist
            ConflictError: If posts or trainings still reference it
        """
        category = await self.get_category(parse_id(raw_id))

        usage = await self.resources.count_in_category(category.id)
        ensure_category_unused(category.id, usage)

        await self.repo.delete(category)
        logger.info("category_deleted", category_id=category.id)


CategorySvc = Annotated[CategoryService, Depends(CategoryService)]
