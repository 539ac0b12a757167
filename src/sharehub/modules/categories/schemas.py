"""Pydantic schemas for category operations."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sharehub.core.constants import MAX_CATEGORY_NAME_LENGTH


class CategoryCreate(BaseModel):
    """Schema for creating a category.

    Surrounding whitespace is dropped; a blank name is rejected.
    """

    name: str = Field(..., max_length=MAX_CATEGORY_NAME_LENGTH)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Category name is required")
        return v


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
