"""Object storage for uploaded files."""

from sharehub.core.storage.s3 import (
    ObjectStorage,
    S3Storage,
    Storage,
    StoredObject,
    get_storage,
)


__all__ = [
    "ObjectStorage",
    "S3Storage",
    "Storage",
    "StoredObject",
    "get_storage",
]
