"""Account repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import select

from sharehub.api.dependencies import DBSession
from sharehub.core.permissions.types import Role
from sharehub.modules.accounts.models import Account


class AccountRepository:
    """Repository for Account database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, account: Account) -> Account:
        """Create a new account.

        Args:
            account: Account instance to create

        Returns:
            The created account with ID populated
        """
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def get_by_id(self, account_id: int) -> Account | None:
        stmt = select(Account).where(Account.id == account_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Account | None:
        stmt = select(Account).where(Account.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_first_admin(self) -> Account | None:
        stmt = select(Account).where(Account.role == Role.ADMIN).order_by(Account.id).limit(1)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Account]:
        """List every account, oldest first."""
        stmt = select(Account).order_by(Account.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def set_role(self, account: Account, role: Role) -> Account:
        account.role = role
        await self.session.flush()
        await self.session.refresh(account)
        return account


AccountRepo = Annotated[AccountRepository, Depends(AccountRepository)]
