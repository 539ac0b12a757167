"""Authentication module for JWT and password handling."""

from sharehub.core.auth.backend import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from sharehub.core.auth.dependencies import (
    CurrentAccount,
    CurrentActor,
    CurrentAdmin,
    OptionalActor,
    get_current_account,
    get_current_actor,
    get_optional_actor,
)
from sharehub.core.auth.middleware import ActorContextMiddleware, RequestIdMiddleware
from sharehub.core.auth.schemas import TokenData, TokenResponse


__all__ = [
    # Middleware
    "ActorContextMiddleware",
    # Dependencies
    "CurrentAccount",
    "CurrentActor",
    "CurrentAdmin",
    "OptionalActor",
    "RequestIdMiddleware",
    # Schemas
    "TokenData",
    "TokenResponse",
    # Token utilities
    "create_access_token",
    "decode_token",
    "get_current_account",
    "get_current_actor",
    "get_optional_actor",
    # Password utilities
    "hash_password",
    "verify_password",
]
