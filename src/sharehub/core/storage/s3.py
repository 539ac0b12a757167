"""S3 object storage.

boto3 is synchronous, so every call runs in Starlette's threadpool to keep
the event loop free.
"""

from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache
from typing import Annotated, Any, Protocol

import boto3
import structlog
from botocore.config import Config
from fastapi import Depends
from starlette.concurrency import run_in_threadpool

from sharehub.config import settings


logger = structlog.get_logger()


@dataclass(frozen=True)
class StoredObject:
    """One entry of a bucket listing."""

    key: str
    size: int
    last_modified: datetime | None
    etag: str | None


class ObjectStorage(Protocol):
    """Defines the operations the API needs from object storage."""

    async def upload(self, key: str, body: bytes, content_type: str) -> None: ...

    async def delete(self, key: str) -> None: ...

    async def presigned_url(self, key: str, expires_in: int | None = None) -> str: ...

    async def list_all_objects(self, prefix: str | None = None) -> list[StoredObject]: ...


class S3Storage:
    """S3 (or S3-compatible) bucket wrapper."""

    def __init__(self, client: Any, bucket: str, expires_in: int) -> None:
        self.client = client
        self.bucket = bucket
        self.expires_in = expires_in

    @classmethod
    def from_settings(cls) -> "S3Storage":
        """Build the client from the AWS settings.

        Raises:
            ValueError: If no bucket is configured
        """
        if not settings.aws_bucket_name:
            raise ValueError("AWS_BUCKET_NAME must be configured")

        config = Config(
            s3={"addressing_style": "path" if settings.aws_s3_force_path_style else "auto"},
            signature_version="s3v4",
        )
        client = boto3.client(
            "s3",
            endpoint_url=settings.aws_s3_endpoint,
            region_name=settings.aws_region,
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
            config=config,
        )
        return cls(client, settings.aws_bucket_name, settings.signed_url_expire_seconds)

    async def upload(self, key: str, body: bytes, content_type: str) -> None:
        await run_in_threadpool(
            self.client.put_object,
            Bucket=self.bucket,
            Key=key,
            Body=body,
            ContentType=content_type,
        )
        logger.info("object_uploaded", key=key, size=len(body))

    async def delete(self, key: str) -> None:
        await run_in_threadpool(self.client.delete_object, Bucket=self.bucket, Key=key)
        logger.info("object_deleted", key=key)

    async def presigned_url(self, key: str, expires_in: int | None = None) -> str:
        """Return a time-limited GET URL for ``key``."""
        return await run_in_threadpool(
            self.client.generate_presigned_url,
            ClientMethod="get_object",
            Params={"Bucket": self.bucket, "Key": key},
            ExpiresIn=expires_in or self.expires_in,
        )

    async def list_all_objects(self, prefix: str | None = None) -> list[StoredObject]:
        """List every object in the bucket.

        Follows ``NextContinuationToken`` until the listing is no longer
        truncated.

        Args:
            prefix: Only keys starting with this prefix

        Returns:
            Objects in the order S3 returns them
        """
        objects: list[StoredObject] = []
        token: str | None = None

        while True:
            params: dict[str, Any] = {"Bucket": self.bucket}
            if prefix:
                params["Prefix"] = prefix
            if token:
                params["ContinuationToken"] = token

            page = await run_in_threadpool(self.client.list_objects_v2, **params)

            for item in page.get("Contents", []):
                objects.append(
                    StoredObject(
                        key=item["Key"],
                        size=item.get("Size", 0),
                        last_modified=item.get("LastModified"),
                        etag=item.get("ETag"),
                    )
                )

            token = page.get("NextContinuationToken")
            if not page.get("IsTruncated") or not token:
                break

        return objects


@lru_cache
def get_storage() -> S3Storage:
    """Get the process-wide storage client."""
    return S3Storage.from_settings()


Storage = Annotated[ObjectStorage, Depends(get_storage)]
