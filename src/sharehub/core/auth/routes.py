"""Authentication API routes.

Provides endpoints for:
- Account signup
- Login
- Profile and session checks
"""

from fastapi import APIRouter, status

from sharehub.core.auth.dependencies import CurrentAccount
from sharehub.core.auth.schemas import (
    AuthenticatedResponse,
    LoginRequest,
    SignupRequest,
    SignupResponse,
    TokenResponse,
)
from sharehub.core.auth.service import AuthSvc
from sharehub.modules.accounts.schemas import AccountResponse


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/signup",
    response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
)
async def signup(data: SignupRequest, service: AuthSvc) -> SignupResponse:
    """Create a USER account."""
    account = await service.signup(
        email=data.email,
        password=data.password,
        name=data.name,
    )
    return SignupResponse(id=account.id)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login with email and password",
    description="Authenticate with email and password to receive an access token.",
)
async def login(data: LoginRequest, service: AuthSvc) -> TokenResponse:
    _account, tokens = await service.login(email=data.email, password=data.password)
    return tokens


@router.get("/me", response_model=AccountResponse, summary="Current account profile")
async def me(account: CurrentAccount) -> AccountResponse:
    return AccountResponse.model_validate(account)


@router.get(
    "/authenticated",
    response_model=AuthenticatedResponse,
    summary="Check the bearer token",
)
async def authenticated(account: CurrentAccount) -> AuthenticatedResponse:
    return AuthenticatedResponse(role=account.role)
