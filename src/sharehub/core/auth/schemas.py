"""Authentication schemas for token handling."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from sharehub.core.constants import MAX_NAME_LENGTH, MAX_PASSWORD_LENGTH, MIN_PASSWORD_LENGTH
from sharehub.core.permissions.types import Role


class TokenData(BaseModel):
    """Data extracted from a JWT token.

    Attributes:
        account_id: The account's id
        role: Role claimed at issue time
        exp: Token expiration time
        type: Token type
    """

    account_id: int
    role: Role
    exp: datetime
    type: str = "access"


class SignupRequest(BaseModel):
    """Schema for creating an account."""

    email: EmailStr
    password: str = Field(
        ..., min_length=MIN_PASSWORD_LENGTH, max_length=MAX_PASSWORD_LENGTH
    )
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)


class SignupResponse(BaseModel):
    message: str = "User created successfully"
    id: int


class LoginRequest(BaseModel):
    """Schema for email/password login."""

    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    """Schema for authentication token response."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Access token expiration in seconds")


class AuthenticatedResponse(BaseModel):
    is_authenticated: bool = True
    role: Role
