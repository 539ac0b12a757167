"""Repositories for shareable resources and their grants."""

from typing import Annotated, Generic, TypeVar

import structlog
from fastapi import Depends
from sqlalchemy import delete, exists, func, or_, select, true
from sqlalchemy.exc import IntegrityError
from sqlalchemy.sql.elements import ColumnElement

from sharehub.api.dependencies import DBSession
from sharehub.core.constants import DEFAULT_CAN_DELETE, DEFAULT_CAN_EDIT, DEFAULT_CAN_VIEW
from sharehub.core.permissions import Actor
from sharehub.modules.resources.models import Grant, Resource
from sharehub.modules.resources.schemas import GrantFlagsUpdate


logger = structlog.get_logger()

ModelT = TypeVar("ModelT", bound=Resource)


class ResourceRepository(Generic[ModelT]):
    """Repository for one kind of resource.

    Bound to ``Resource`` itself, queries cover posts and trainings
    together; bound to ``Post`` or ``Training``, only that kind.
    """

    def __init__(self, session: DBSession, model: type[ModelT] = Resource) -> None:  # type: ignore[assignment]
        self.session = session
        self.model = model

    async def get_by_id(self, resource_id: int) -> ModelT | None:
        stmt = select(self.model).where(self.model.id == resource_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _visible_to(self, actor: Actor | None) -> ColumnElement[bool]:
        """Rows the actor may see in a listing."""
        if actor is None:
            return self.model.is_public.is_(True)
        if actor.is_admin:
            return true()

        shared_with_actor = exists().where(
            Grant.resource_id == self.model.id,
            Grant.grantee_id == actor.id,
            Grant.can_view.is_(True),
        )
        return or_(
            self.model.is_public.is_(True),
            self.model.owner_id == actor.id,
            shared_with_actor,
        )

    async def list_visible(
        self,
        actor: Actor | None,
        category_id: int | None = None,
    ) -> list[ModelT]:
        """List the resources ``actor`` may view, newest first.

        Args:
            actor: The caller, or None when unauthenticated
            category_id: Optional category filter

        Returns:
            Matching resources
        """
        stmt = select(self.model).where(self._visible_to(actor))
        if category_id is not None:
            stmt = stmt.where(self.model.category_id == category_id)
        stmt = stmt.order_by(self.model.created_at.desc(), self.model.id.desc())

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_in_category(self, category_id: int) -> int:
        stmt = (
            select(func.count())
            .select_from(self.model)
            .where(self.model.category_id == category_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create(self, resource: ModelT) -> ModelT:
        self.session.add(resource)
        await self.session.flush()
        await self.session.refresh(resource)
        return resource

    async def update(self, resource: ModelT) -> ModelT:
        await self.session.flush()
        await self.session.refresh(resource)
        return resource

    async def delete(self, resource: ModelT) -> None:
        await self.session.delete(resource)
        await self.session.flush()


class GrantRepository:
    """Repository for per-account grants on resources."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def find(self, resource_id: int, account_id: int) -> Grant | None:
        stmt = select(Grant).where(
            Grant.resource_id == resource_id,
            Grant.grantee_id == account_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_resource(self, resource_id: int) -> list[Grant]:
        stmt = select(Grant).where(Grant.resource_id == resource_id).order_by(Grant.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def upsert(
        self,
        resource_id: int,
        account_id: int,
        flags: GrantFlagsUpdate,
    ) -> tuple[Grant, bool]:
        """Create or update the grant for (resource, account).

        Flags left as None keep their current value, or take the
        defaults (view only) when the grant is new. A concurrent insert
        of the same pair loses on the unique constraint and is retried
        as an update.

        Returns:
            Tuple of (grant, created)
        """
        existing = await self.find(resource_id, account_id)
        if existing:
            return await self._apply(existing, flags), False

        grant = Grant(
            resource_id=resource_id,
            grantee_id=account_id,
            can_view=_coalesce(flags.can_view, DEFAULT_CAN_VIEW),
            can_edit=_coalesce(flags.can_edit, DEFAULT_CAN_EDIT),
            can_delete=_coalesce(flags.can_delete, DEFAULT_CAN_DELETE),
        )
        try:
            async with self.session.begin_nested():
                self.session.add(grant)
                await self.session.flush()
        except IntegrityError:
            logger.info(
                "grant_insert_raced",
                resource_id=resource_id,
                account_id=account_id,
            )
            existing = await self.find(resource_id, account_id)
            if existing is None:
                raise
            return await self._apply(existing, flags), False

        await self.session.refresh(grant)
        return grant, True

    async def _apply(self, grant: Grant, flags: GrantFlagsUpdate) -> Grant:
        grant.can_view = _coalesce(flags.can_view, grant.can_view)
        grant.can_edit = _coalesce(flags.can_edit, grant.can_edit)
        grant.can_delete = _coalesce(flags.can_delete, grant.can_delete)
        await self.session.flush()
        await self.session.refresh(grant)
        return grant

    async def delete(self, resource_id: int, account_id: int) -> int:
        """Delete one grant. Returns the number of rows removed."""
        stmt = delete(Grant).where(
            Grant.resource_id == resource_id,
            Grant.grantee_id == account_id,
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def delete_for_resource(self, resource_id: int) -> int:
        """Delete every grant on a resource. Returns the number of rows removed."""
        stmt = delete(Grant).where(Grant.resource_id == resource_id)
        result = await self.session.execute(stmt)
        return result.rowcount


def _coalesce(value: bool | None, fallback: bool) -> bool:
    return fallback if value is None else value


GrantRepo = Annotated[GrantRepository, Depends(GrantRepository)]
