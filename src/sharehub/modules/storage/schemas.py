"""Pydantic schemas for the bucket listing."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class StoredObjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    key: str
    size: int
    last_modified: datetime | None = None
    etag: str | None = None


class ObjectListResponse(BaseModel):
    count: int
    objects: list[StoredObjectResponse]
