"""FastAPI dependencies for authentication.

This module provides FastAPI dependency injection functions for:
- Extracting and validating JWT tokens
- Loading the current account and turning it into an Actor
- Requiring the administrator role
"""

from typing import Annotated, Any

import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from sharehub.api.dependencies import DBSession
from sharehub.core.auth.backend import decode_token
from sharehub.core.auth.schemas import TokenData
from sharehub.core.errors import UnauthorizedError
from sharehub.core.permissions import Actor, ensure_admin


# HTTP Bearer token security scheme
bearer_scheme = HTTPBearer(auto_error=False)


async def get_token_data(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> TokenData:
    """Extract and validate token data from the Authorization header.

    Raises:
        UnauthorizedError: If token is missing or invalid
    """
    if not credentials:
        raise UnauthorizedError(
            "Missing authentication token",
            error_code="missing_token",
        )

    token_data = decode_token(credentials.credentials)
    if not token_data:
        raise UnauthorizedError(
            "Invalid or expired token",
            error_code="invalid_token",
        )

    if token_data.type != "access":
        raise UnauthorizedError(
            "Invalid token type",
            error_code="invalid_token_type",
        )

    return token_data


async def get_current_account(
    token_data: Annotated[TokenData, Depends(get_token_data)],
    db: DBSession,
    request: Request,
) -> Any:  # Returns Account, but use Any to avoid circular import
    """Load the authenticated account.

    The role is read from the database rather than the token, so a
    promotion or demotion applies to tokens issued before it.

    Raises:
        UnauthorizedError: If the account no longer exists
    """
    from sharehub.modules.accounts.repos import AccountRepository  # noqa: PLC0415

    account = await AccountRepository(db).get_by_id(token_data.account_id)

    if not account:
        raise UnauthorizedError(
            "User not found",
            error_code="user_not_found",
        )

    request.state.account_id = account.id
    structlog.contextvars.bind_contextvars(account_id=account.id)
    return account


async def get_current_actor(
    account: Annotated[Any, Depends(get_current_account)],
) -> Actor:
    """The current account reduced to what the resolver needs."""
    return Actor.from_account(account)


async def get_current_admin(
    actor: Annotated[Actor, Depends(get_current_actor)],
) -> Actor:
    """The current actor, ensuring it is an administrator.

    Raises:
        ForbiddenError: If the actor is not an administrator
    """
    ensure_admin(actor)
    return actor


async def get_optional_actor(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: DBSession,
) -> Actor | None:
    """Get the current actor if authenticated, None otherwise.

    Useful for endpoints that work with or without authentication.
    """
    if not credentials:
        return None

    token_data = decode_token(credentials.credentials)
    if not token_data or token_data.type != "access":
        return None

    from sharehub.modules.accounts.repos import AccountRepository  # noqa: PLC0415

    account = await AccountRepository(db).get_by_id(token_data.account_id)
    if not account:
        return None

    return Actor.from_account(account)


# Type aliases for cleaner dependency injection
# Use Any for Account type to avoid circular imports at runtime
CurrentAccount = Annotated[Any, Depends(get_current_account)]
CurrentActor = Annotated[Actor, Depends(get_current_actor)]
CurrentAdmin = Annotated[Actor, Depends(get_current_admin)]
OptionalActor = Annotated[Actor | None, Depends(get_optional_actor)]
