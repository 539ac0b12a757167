"""Request-scoped access checks.

Wraps the pure resolver with the two lookups it depends on and turns a
denial into the right exception: a missing resource is a NotFoundError,
a refused operation a ForbiddenError.
"""

from typing import Generic, Protocol, TypeVar

import structlog

from sharehub.core.errors import ForbiddenError, NotFoundError
from sharehub.core.permissions.resolver import (
    ADMIN,
    PUBLIC_READ_ONLY,
    needs_grant,
    resolve,
)
from sharehub.core.permissions.types import (
    Actor,
    GrantFlags,
    ShareableResource,
    VerbClass,
)
from sharehub.core.utils.parsing import parse_id


logger = structlog.get_logger()

ResourceT = TypeVar("ResourceT", bound=ShareableResource, covariant=True)


class ResourceStore(Protocol[ResourceT]):
    """Read access to resources."""

    async def get_by_id(self, resource_id: int) -> ResourceT | None: ...


class GrantStore(Protocol):
    """Read access to grants."""

    async def find(self, resource_id: int, account_id: int) -> GrantFlags | None: ...


class AccessChecker(Generic[ResourceT]):
    """Service for authorizing an actor against one resource.

    Performs at most one grant lookup per check and never writes.
    """

    def __init__(
        self,
        resources: ResourceStore[ResourceT],
        grants: GrantStore,
        label: str = "resource",
    ) -> None:
        self.resources = resources
        self.grants = grants
        self.label = label

    async def load(self, raw_id: str | int) -> ResourceT:
        """Parse the identifier and fetch the resource.

        Raises:
            ValidationError: If the identifier is malformed (no lookup is made)
            NotFoundError: If no resource has that identifier
        """
        resource_id = parse_id(raw_id)
        resource = await self.resources.get_by_id(resource_id)
        if resource is None:
            raise NotFoundError(
                f"{self.label.capitalize()} not found",
                resource=self.label,
                resource_id=str(resource_id),
            )
        return resource

    async def authorize(
        self,
        actor: Actor,
        raw_id: str | int,
        verb: VerbClass,
    ) -> ResourceT:
        """Load a resource and check that ``actor`` may apply ``verb`` to it.

        Args:
            actor: The authenticated caller
            raw_id: Identifier as received in the URL
            verb: Verb class of the requested operation

        Returns:
            The resource, for the handler to act on

        Raises:
            ValidationError: If the identifier is malformed
            NotFoundError: If the resource does not exist
            ForbiddenError: If the resolver denies the operation
        """
        resource = await self.load(raw_id)

        grant = None
        if needs_grant(actor, resource):
            grant = await self.grants.find(resource.id, actor.id)

        decision = resolve(actor, resource, verb, grant)

        if not decision.allowed:
            logger.info(
                "access_denied",
                resource=self.label,
                resource_id=resource.id,
                account_id=actor.id,
                verb=verb.value,
                reason=decision.reason,
            )
            if decision.reason == PUBLIC_READ_ONLY:
                message = f"You can only view public {self.label}s"
            else:
                message = "You do not have permission to access this resource"
            raise ForbiddenError(
                message,
                error_code="access_denied",
                details={"verb": verb.value},
            )

        if decision.reason == ADMIN and resource.owner_id != actor.id:
            logger.info(
                "admin_override",
                resource=self.label,
                resource_id=resource.id,
                account_id=actor.id,
                verb=verb.value,
            )

        return resource
