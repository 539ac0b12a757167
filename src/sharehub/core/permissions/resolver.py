"""Access resolution for shareable resources.

The rules are evaluated in a fixed order and the first match decides:

1. administrators may do anything;
2. owners may do anything with their own resources;
3. public resources are readable by everyone and writable by nobody else;
4. otherwise the actor's grant decides, flag by flag;
5. no grant means no access.

Everything here is pure. The grant, when one is needed, is looked up by
the caller; ``needs_grant`` says whether that lookup can be skipped.
"""

from typing import NamedTuple

from sharehub.core.permissions.types import (
    Actor,
    GrantFlags,
    ShareableResource,
    VerbClass,
    grant_allows,
)


class AccessDecision(NamedTuple):
    """Outcome of a resolution plus the rule that produced it."""

    allowed: bool
    reason: str


ADMIN = "admin"
OWNER = "owner"
PUBLIC_READ = "public_read"
PUBLIC_READ_ONLY = "public_read_only"
GRANT = "grant"
GRANT_MISSING_FLAG = "grant_missing_flag"
NO_GRANT = "no_grant"


def needs_grant(actor: Actor, resource: ShareableResource) -> bool:
    """True when rules 1-3 cannot decide and a grant lookup is required."""
    return not (
        actor.is_admin or resource.owner_id == actor.id or resource.is_public
    )


def resolve(
    actor: Actor,
    resource: ShareableResource,
    verb: VerbClass,
    grant: GrantFlags | None = None,
) -> AccessDecision:
    """Decide whether ``actor`` may perform ``verb`` on ``resource``.

    Args:
        actor: The caller and its role
        resource: The post or training being addressed
        verb: The verb class of the operation
        grant: The actor's grant on the resource, if any

    Returns:
        The decision and the name of the rule that made it
    """
    if actor.is_admin:
        return AccessDecision(True, ADMIN)

    if resource.owner_id == actor.id:
        return AccessDecision(True, OWNER)

    if resource.is_public:
        if verb is VerbClass.READ:
            return AccessDecision(True, PUBLIC_READ)
        return AccessDecision(False, PUBLIC_READ_ONLY)

    if grant is None:
        return AccessDecision(False, NO_GRANT)

    if grant_allows(grant, verb):
        return AccessDecision(True, GRANT)
    return AccessDecision(False, GRANT_MISSING_FLAG)


def is_allowed(
    actor: Actor,
    resource: ShareableResource,
    verb: VerbClass,
    grant: GrantFlags | None = None,
) -> bool:
    """Boolean shorthand for ``resolve``."""
    return resolve(actor, resource, verb, grant).allowed
