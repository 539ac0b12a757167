"""Category repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import func, select

from sharehub.api.dependencies import DBSession
from sharehub.modules.categories.models import Category


class CategoryRepository:
    """Repository for Category database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, category: Category) -> Category:
        self.session.add(category)
        await self.session.flush()
        await self.session.refresh(category)
        return category

    async def get_by_id(self, category_id: int) -> Category | None:
        stmt = select(Category).where(Category.id == category_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Category | None:
        """Get a category by name, ignoring case."""
        stmt = select(Category).where(func.lower(Category.name) == name.lower())
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_all(self) -> list[Category]:
        stmt = select(Category).order_by(Category.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete(self, category: Category) -> None:
        await self.session.delete(category)
        await self.session.flush()


CategoryRepo = Annotated[CategoryRepository, Depends(CategoryRepository)]
