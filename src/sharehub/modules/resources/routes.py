"""Router factory for shareable resource kinds.

Posts and trainings expose the same read, delete, visibility and sharing
endpoints; only creation differs, and each kind adds its own create route
to the router built here.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, Response, status

from sharehub.core.auth.dependencies import CurrentActor, OptionalActor
from sharehub.core.permissions import VerbClass
from sharehub.modules.resources.dependencies import TargetAccountId, require_access
from sharehub.modules.resources.models import Resource
from sharehub.modules.resources.schemas import (
    DownloadResponse,
    GrantResponse,
    ResourceResponse,
    ShareRequest,
    ShareResponse,
    VisibilityUpdate,
)
from sharehub.modules.resources.services import ResourceService


async def render(
    service: ResourceService[Any],
    schema: type[ResourceResponse],
    resource: Resource,
) -> ResourceResponse:
    """Serialize a resource with a fresh presigned URL for its file."""
    url = await service.presigned_url(resource)
    return schema.model_validate(resource).model_copy(update={"image_url": url})


def build_resource_router(
    *,
    prefix: str,
    label: str,
    provider: Any,
    response_model: type[ResourceResponse],
) -> APIRouter:
    """Create the router shared by one resource kind.

    Args:
        prefix: URL segment, e.g. ``posts``
        label: Singular name used in messages, e.g. ``post``
        provider: Dependency returning the kind's ResourceService
        response_model: Schema used to serialize the kind

    Returns:
        Router with every endpoint except creation
    """
    router = APIRouter(prefix=f"/{prefix}", tags=[prefix])

    Service = Annotated[ResourceService[Any], Depends(provider)]
    # Verb class taken from the HTTP method: GET reads, PATCH updates, DELETE deletes
    Authorized = Annotated[Resource, Depends(require_access(provider))]
    Shareable = Annotated[Resource, Depends(require_access(provider, VerbClass.UPDATE))]

    @router.get(
        "",
        response_model=list[response_model],  # type: ignore[valid-type]
        summary=f"List visible {prefix}",
        description=(
            "Administrators see everything; other callers see public items, "
            "their own, and those shared with them."
        ),
    )
    async def list_resources(
        actor: OptionalActor,
        service: Service,
        category_id: Annotated[str | None, Query(alias="categoryId")] = None,
    ) -> list[ResourceResponse]:
        resources = await service.list_visible(actor, category_id)
        return [await render(service, response_model, resource) for resource in resources]

    @router.get(
        "/{resource_id}/download",
        response_model=DownloadResponse,
        summary=f"Download link for a {label}",
    )
    async def download(resource: Authorized, service: Service) -> DownloadResponse:
        return await service.download(resource)

    @router.get(
        "/{resource_id}/image",
        response_model=DownloadResponse,
        summary=f"Image link for a {label}",
    )
    async def image(resource: Authorized, service: Service) -> DownloadResponse:
        return await service.download(resource)

    @router.delete(
        "/{resource_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary=f"Delete a {label}",
    )
    async def delete_resource(resource: Authorized, service: Service) -> None:
        await service.delete(resource)

    @router.patch(
        "/{resource_id}/visibility",
        response_model=response_model,
        summary=f"Make a {label} public or private",
    )
    async def set_visibility(
        data: VisibilityUpdate,
        resource: Authorized,
        service: Service,
    ) -> ResourceResponse:
        resource = await service.set_visibility(resource, data.is_public)
        return await render(service, response_model, resource)

    @router.post(
        "/{resource_id}/share",
        response_model=ShareResponse,
        status_code=status.HTTP_201_CREATED,
        summary=f"Share a {label} with another account",
        description="Returns 201 when a grant is created and 200 when an existing one is updated.",
    )
    async def share(
        data: ShareRequest,
        resource: Shareable,
        service: Service,
        response: Response,
    ) -> ShareResponse:
        grant, created = await service.share(resource, data)
        if not created:
            response.status_code = status.HTTP_200_OK
        return ShareResponse(
            message=f"{label.capitalize()} shared" if created else "Share updated",
            grant=GrantResponse.model_validate(grant),
        )

    @router.get(
        "/{resource_id}/shared",
        response_model=list[GrantResponse],
        summary=f"List who a {label} is shared with",
    )
    async def list_shared(
        resource_id: str,
        actor: CurrentActor,
        service: Service,
    ) -> list[GrantResponse]:
        grants = await service.list_shared(actor, resource_id)
        return [GrantResponse.model_validate(grant) for grant in grants]

    @router.delete(
        "/{resource_id}/share/{user_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary=f"Stop sharing a {label} with an account",
    )
    async def unshare(
        account_id: TargetAccountId,
        resource: Authorized,
        service: Service,
    ) -> None:
        # account_id comes first: FastAPI resolves dependencies in order
        await service.unshare(resource, account_id)

    return router
