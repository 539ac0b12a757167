"""In-memory doubles for external services."""

from dataclasses import dataclass, field

from botocore.exceptions import ClientError

from sharehub.core.storage import StoredObject


@dataclass
class InMemoryStorage:
    """Object storage that keeps uploads in a dict.

    Set ``fail_deletes`` to make ``delete`` raise like S3 would.
    """

    base_url: str = "https://storage.test"
    objects: dict[str, tuple[bytes, str]] = field(default_factory=dict)
    fail_deletes: bool = False

    async def upload(self, key: str, body: bytes, content_type: str) -> None:
        self.objects[key] = (body, content_type)

    async def delete(self, key: str) -> None:
        if self.fail_deletes:
            raise ClientError(
                {"Error": {"Code": "AccessDenied", "Message": "denied"}},
                "DeleteObject",
            )
        self.objects.pop(key, None)

    async def presigned_url(self, key: str, expires_in: int | None = None) -> str:
        return f"{self.base_url}/{key}?expires={expires_in or 300}"

    async def list_all_objects(self, prefix: str | None = None) -> list[StoredObject]:
        return [
            StoredObject(key=key, size=len(body), last_modified=None, etag=None)
            for key, (body, _type) in sorted(self.objects.items())
            if not prefix or key.startswith(prefix)
        ]
