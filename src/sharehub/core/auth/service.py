"""Authentication service for signup and login."""

from typing import Annotated

import structlog
from fastapi import Depends

from sharehub.api.dependencies import DBSession
from sharehub.config import settings
from sharehub.core.auth.backend import create_access_token, hash_password, verify_password
from sharehub.core.auth.schemas import TokenResponse
from sharehub.core.errors import ConflictError, UnauthorizedError
from sharehub.core.permissions import Role
from sharehub.modules.accounts.models import Account
from sharehub.modules.accounts.repos import AccountRepository


logger = structlog.get_logger()


class AuthService:
    """Service for authentication operations.

    Handles account signup and email/password login.
    """

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.account_repo = AccountRepository(db)

    async def signup(self, email: str, password: str, name: str) -> Account:
        """Create a USER account.

        Args:
            email: Account email address
            password: Plain text password
            name: Display name

        Returns:
            The created account

        Raises:
            ConflictError: If the email is already registered
        """
        existing = await self.account_repo.get_by_email(email)
        if existing:
            raise ConflictError(
                "User already exists",
                error_code="email_taken",
            )

        account = Account(
            email=email,
            name=name,
            password_hash=hash_password(password),
            role=Role.USER,
        )
        account = await self.account_repo.create(account)

        logger.info("account_created", account_id=account.id)
        return account

    async def login(self, email: str, password: str) -> tuple[Account, TokenResponse]:
        """Authenticate an account with email and password.

        Returns:
            Tuple of (account, token response)

        Raises:
            UnauthorizedError: If credentials are invalid
        """
        account = await self.account_repo.get_by_email(email)
        if not account or not verify_password(password, account.password_hash):
            logger.info("login_failed")
            raise UnauthorizedError(
                "Invalid email or password",
                error_code="invalid_credentials",
            )

        token = create_access_token(account.id, account.role)
        logger.info("login_succeeded", account_id=account.id)

        return account, TokenResponse(
            access_token=token,
            expires_in=settings.access_token_expire_minutes * 60,
        )


AuthSvc = Annotated[AuthService, Depends(AuthService)]
