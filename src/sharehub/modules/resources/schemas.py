"""Pydantic schemas shared by posts and trainings."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from sharehub.modules.accounts.schemas import AccountSummary


class CategorySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class ResourceResponse(BaseModel):
    """Fields every post and training carries in API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    kind: str
    owner_id: int
    owner: AccountSummary
    category_id: int
    category: CategorySummary
    is_public: bool
    original_file_name: str
    file_type: str
    created_at: datetime
    image_url: str | None = Field(
        default=None, description="Presigned URL of the stored file"
    )


class PostResponse(ResourceResponse):
    caption: str | None = None


class TrainingLinkResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    url: str


class TrainingResponse(ResourceResponse):
    title: str | None = None
    description: str | None = None
    links: list[TrainingLinkResponse] = Field(default_factory=list)


class VisibilityUpdate(BaseModel):
    """Schema for changing the public flag."""

    is_public: bool


class GrantFlagsUpdate(BaseModel):
    """Grant flags where None means "leave as is"."""

    can_view: bool | None = None
    can_edit: bool | None = None
    can_delete: bool | None = None


class ShareRequest(GrantFlagsUpdate):
    """Schema for sharing a resource with another account by email."""

    user_email: EmailStr


class GrantResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    resource_id: int
    grantee_id: int
    grantee: AccountSummary
    can_view: bool
    can_edit: bool
    can_delete: bool


class ShareResponse(BaseModel):
    message: str
    grant: GrantResponse


class DownloadResponse(BaseModel):
    """Presigned download link for a stored file."""

    url: str
    file_name: str
    file_type: str
    expires_in: int
