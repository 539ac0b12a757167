"""Pydantic schemas for account operations."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from sharehub.core.permissions.types import Role


class AccountSummary(BaseModel):
    """Owner/grantee summary embedded in resource responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class AccountResponse(AccountSummary):
    """Schema for account data in API responses."""

    role: Role
    created_at: datetime


class RoleChangeResponse(BaseModel):
    message: str
    user: AccountResponse
