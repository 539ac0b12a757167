"""Account service for role management."""

from typing import Annotated

import structlog
from fastapi import Depends

from sharehub.core.errors import NotFoundError
from sharehub.core.permissions import Actor, Role, ensure_not_self_demotion
from sharehub.core.utils.parsing import parse_id
from sharehub.modules.accounts.models import Account
from sharehub.modules.accounts.repos import AccountRepo


logger = structlog.get_logger()


class AccountService:
    """Administrator operations over accounts."""

    def __init__(self, repo: AccountRepo) -> None:
        self.repo = repo

    async def list_accounts(self) -> list[Account]:
        return await self.repo.list_all()

    async def get_account(self, account_id: int) -> Account:
        """Get an account by ID.

        Raises:
            NotFoundError: If the account does not exist
        """
        account = await self.repo.get_by_id(account_id)
        if not account:
            raise NotFoundError(
                "User not found",
                resource="account",
                resource_id=str(account_id),
            )
        return account

    async def promote(self, actor: Actor, raw_id: str) -> Account:
        """Give an account the ADMIN role.

        Promoting an administrator again leaves it unchanged.
        """
        account = await self.get_account(parse_id(raw_id))
        account = await self.repo.set_role(account, Role.ADMIN)

        logger.info("account_promoted", account_id=account.id, by=actor.id)
        return account

    async def demote(self, actor: Actor, raw_id: str) -> Account:
        """Give an account the USER role.

        Raises:
            ConflictError: If the actor is demoting itself
            NotFoundError: If the account does not exist
        """
        account_id = parse_id(raw_id)
        # Checked before the lookup: an admin can never lose its own role
        ensure_not_self_demotion(actor, account_id)

        account = await self.get_account(account_id)
        account = await self.repo.set_role(account, Role.USER)

        logger.info("account_demoted", account_id=account.id, by=actor.id)
        return account


AccountSvc = Annotated[AccountService, Depends(AccountService)]
