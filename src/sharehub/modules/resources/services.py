"""Business logic shared by posts and trainings."""

from collections.abc import Callable
from typing import Generic

import structlog
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import UploadFile

from sharehub.api.dependencies import DBSession
from sharehub.config import settings
from sharehub.core.errors import NotFoundError
from sharehub.core.permissions import AccessChecker, Actor, VerbClass, ensure_owner_or_admin
from sharehub.core.storage import ObjectStorage, Storage
from sharehub.core.utils.parsing import generate_object_key, parse_id
from sharehub.modules.accounts.repos import AccountRepository
from sharehub.modules.categories.repos import CategoryRepository
from sharehub.modules.resources.models import Grant
from sharehub.modules.resources.repos import GrantRepository, ModelT, ResourceRepository
from sharehub.modules.resources.schemas import DownloadResponse, ShareRequest


logger = structlog.get_logger()

DEFAULT_FILE_TYPE = "application/octet-stream"


class ResourceService(Generic[ModelT]):
    """Service for one kind of shareable resource.

    Every operation on an existing resource goes through ``authorize``
    (or the ``require_access`` dependency) first; the methods below
    assume the caller is already allowed.
    """

    def __init__(
        self,
        db: DBSession,
        storage: ObjectStorage,
        model: type[ModelT],
        label: str,
    ) -> None:
        self.db = db
        self.storage = storage
        self.label = label
        self.resources: ResourceRepository[ModelT] = ResourceRepository(db, model)
        self.grants = GrantRepository(db)
        self.accounts = AccountRepository(db)
        self.categories = CategoryRepository(db)
        self.checker: AccessChecker[ModelT] = AccessChecker(
            self.resources, self.grants, label
        )

    async def authorize(self, actor: Actor, raw_id: str, verb: VerbClass) -> ModelT:
        return await self.checker.authorize(actor, raw_id, verb)

    async def list_visible(
        self,
        actor: Actor | None,
        raw_category_id: str | None = None,
    ) -> list[ModelT]:
        """List what ``actor`` may view, optionally within one category.

        An empty category filter (``?categoryId=``) means no filter.

        Raises:
            ValidationError: If the category filter is not a valid identifier
        """
        category_id = None
        if raw_category_id:
            category_id = parse_id(raw_category_id, field="categoryId")
        return await self.resources.list_visible(actor, category_id)

    async def presigned_url(self, resource: ModelT) -> str:
        return await self.storage.presigned_url(resource.object_key)

    async def create(
        self,
        actor: Actor,
        resource: ModelT,
        file: UploadFile,
        raw_category_id: str,
    ) -> ModelT:
        """Upload the file and store a new resource owned by ``actor``.

        Args:
            actor: The uploader, who becomes the owner
            resource: Unsaved resource with its kind-specific fields set
            file: The uploaded file
            raw_category_id: Category identifier as received in the form

        Raises:
            ValidationError: If the category identifier is malformed
            NotFoundError: If the category does not exist
        """
        category_id = parse_id(raw_category_id, field="category_id")
        category = await self.categories.get_by_id(category_id)
        if not category:
            raise NotFoundError(
                "Category not found",
                resource="category",
                resource_id=str(category_id),
            )

        file_name = file.filename or "upload"
        file_type = file.content_type or DEFAULT_FILE_TYPE
        key = generate_object_key(file_name)

        body = await file.read()
        await self.storage.upload(key, body, file_type)

        resource.owner_id = actor.id
        resource.category_id = category.id
        resource.object_key = key
        resource.original_file_name = file_name
        resource.file_type = file_type

        resource = await self.resources.create(resource)
        logger.info(
            "resource_created",
            kind=self.label,
            resource_id=resource.id,
            owner_id=actor.id,
            is_public=resource.is_public,
        )
        return resource

    async def download(self, resource: ModelT) -> DownloadResponse:
        """Presigned link to the stored file."""
        expires_in = settings.signed_url_expire_seconds
        url = await self.storage.presigned_url(resource.object_key, expires_in)
        return DownloadResponse(
            url=url,
            file_name=resource.original_file_name,
            file_type=resource.file_type,
            expires_in=expires_in,
        )

    async def delete(self, resource: ModelT) -> None:
        """Delete a resource, its grants, its links and its stored file.

        The rows are committed before the file is removed, so a failed
        commit never leaves a row pointing at a missing file. A failure
        to delete the stored file is logged and ignored.
        """
        resource_id = resource.id
        key = resource.object_key

        removed = await self.grants.delete_for_resource(resource_id)
        await self.resources.delete(resource)
        await self.db.commit()

        try:
            await self.storage.delete(key)
        except (BotoCoreError, ClientError) as exc:
            logger.warning(
                "object_delete_failed",
                kind=self.label,
                resource_id=resource_id,
                key=key,
                error=str(exc),
            )

        logger.info(
            "resource_deleted",
            kind=self.label,
            resource_id=resource_id,
            grants_removed=removed,
        )

    async def set_visibility(self, resource: ModelT, is_public: bool) -> ModelT:
        resource.is_public = is_public
        resource = await self.resources.update(resource)
        logger.info(
            "visibility_changed",
            kind=self.label,
            resource_id=resource.id,
            is_public=is_public,
        )
        return resource

    async def share(self, resource: ModelT, data: ShareRequest) -> tuple[Grant, bool]:
        """Grant another account access, or update its existing grant.

        Returns:
            Tuple of (grant, created)

        Raises:
            NotFoundError: If no account has that email
        """
        grantee = await self.accounts.get_by_email(data.user_email)
        if not grantee:
            raise NotFoundError(
                "User not found",
                resource="account",
            )

        grant, created = await self.grants.upsert(resource.id, grantee.id, data)
        logger.info(
            "grant_upserted",
            kind=self.label,
            resource_id=resource.id,
            grantee_id=grantee.id,
            created=created,
            can_view=grant.can_view,
            can_edit=grant.can_edit,
            can_delete=grant.can_delete,
        )
        return grant, created

    async def list_shared(self, actor: Actor, raw_id: str) -> list[Grant]:
        """List a resource's grants.

        Raises:
            ValidationError: If the identifier is malformed
            NotFoundError: If the resource does not exist
            ForbiddenError: If the actor is neither the owner nor an admin
        """
        resource = await self.checker.load(raw_id)
        ensure_owner_or_admin(actor, resource.owner_id)
        return await self.grants.list_for_resource(resource.id)

    async def unshare(self, resource: ModelT, account_id: int) -> int:
        """Remove an account's grant. Removing a missing grant is not an error."""
        removed = await self.grants.delete(resource.id, account_id)
        logger.info(
            "grant_removed",
            kind=self.label,
            resource_id=resource.id,
            grantee_id=account_id,
            removed=removed,
        )
        return removed


def service_provider(
    model: type[ModelT],
    label: str,
) -> Callable[..., ResourceService[ModelT]]:
    """Build a FastAPI dependency returning the service for ``model``."""

    def provide(db: DBSession, storage: Storage) -> ResourceService[ModelT]:
        return ResourceService(db, storage, model, label)

    return provide
