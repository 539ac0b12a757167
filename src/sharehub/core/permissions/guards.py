"""Guards for operations that are not resource-scoped."""

from sharehub.core.errors import ConflictError, ForbiddenError
from sharehub.core.permissions.types import Actor


def ensure_admin(actor: Actor) -> None:
    """Raise ForbiddenError unless the actor is an administrator."""
    if not actor.is_admin:
        raise ForbiddenError(
            "Admin access required",
            error_code="admin_required",
        )


def ensure_not_self_demotion(actor: Actor, target_id: int) -> None:
    """Refuse an administrator's attempt to demote its own account."""
    if target_id == actor.id:
        raise ConflictError(
            "cannot self-demote",
            error_code="self_demotion",
            details={"account_id": target_id},
        )


def ensure_category_unused(category_id: int, usage_count: int) -> None:
    """Refuse to delete a category that resources still reference."""
    if usage_count > 0:
        raise ConflictError(
            "category in use",
            error_code="category_in_use",
            details={"category_id": category_id, "resource_count": usage_count},
        )


def ensure_owner_or_admin(actor: Actor, owner_id: int) -> None:
    """Restrict an operation to the resource owner and administrators."""
    if not actor.is_admin and owner_id != actor.id:
        raise ForbiddenError(
            "Only the owner can see who a resource is shared with",
            error_code="owner_required",
        )
