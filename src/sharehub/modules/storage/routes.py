"""Bucket inspection routes (administrators only)."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Query

from sharehub.core.auth.dependencies import CurrentAdmin
from sharehub.core.storage import Storage
from sharehub.modules.storage.schemas import ObjectListResponse, StoredObjectResponse


logger = structlog.get_logger()

router = APIRouter(prefix="/storage", tags=["storage"])


@router.get(
    "/objects",
    response_model=ObjectListResponse,
    summary="List every object in the bucket",
)
async def list_objects(
    admin: CurrentAdmin,
    storage: Storage,
    prefix: Annotated[str | None, Query()] = None,
) -> ObjectListResponse:
    objects = await storage.list_all_objects(prefix)
    logger.info("bucket_listed", account_id=admin.id, prefix=prefix, count=len(objects))
    return ObjectListResponse(
        count=len(objects),
        objects=[StoredObjectResponse.model_validate(obj) for obj in objects],
    )
