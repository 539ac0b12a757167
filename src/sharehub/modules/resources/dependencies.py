"""FastAPI dependency that authorizes access to one resource."""

from collections.abc import Awaitable, Callable
from typing import Annotated, Any

from fastapi import Depends, Request

from sharehub.core.auth.dependencies import CurrentActor
from sharehub.core.permissions import VerbClass, verb_class_for_method
from sharehub.core.utils.parsing import parse_id
from sharehub.modules.resources.models import Resource
from sharehub.modules.resources.services import ResourceService


def target_account_id(user_id: str) -> int:
    """Parse the ``{user_id}`` path segment.

    Declared ahead of the access check in a route's signature so that a
    malformed id is a 400 for every caller, whatever their rights.
    """
    return parse_id(user_id, field="user_id")


TargetAccountId = Annotated[int, Depends(target_account_id)]


def require_access(
    provider: Callable[..., ResourceService[Any]],
    verb: VerbClass | None = None,
) -> Callable[..., Awaitable[Resource]]:
    """Build a dependency that loads ``{resource_id}`` and checks access.

    Args:
        provider: Service dependency for the resource kind
        verb: Verb class to check; derived from the HTTP method when None

    Returns:
        A dependency resolving to the authorized resource

    Example:
        @router.delete("/{resource_id}")
        async def delete(post: Annotated[Post, Depends(require_access(provide_posts))]):
            ...
    """

    async def dependency(
        resource_id: str,
        request: Request,
        actor: CurrentActor,
        service: Annotated[ResourceService[Any], Depends(provider)],
    ) -> Resource:
        verb_class = verb or verb_class_for_method(request.method)
        return await service.authorize(actor, resource_id, verb_class)

    return dependency
