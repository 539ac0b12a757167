"""Vocabulary shared by the permission resolver and its callers."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from sharehub.core.errors import ValidationError


class Role(str, Enum):
    """Account role. Administrators bypass resource-level checks."""

    USER = "USER"
    ADMIN = "ADMIN"


class VerbClass(str, Enum):
    """Coarse operation category an HTTP method maps to."""

    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


_METHOD_VERBS: dict[str, VerbClass] = {
    "GET": VerbClass.READ,
    "PUT": VerbClass.UPDATE,
    "PATCH": VerbClass.UPDATE,
    "DELETE": VerbClass.DELETE,
}


def verb_class_for_method(method: str) -> VerbClass:
    """Map an HTTP method to its verb class.

    POST creates resources and is never resource-scoped, so it has no
    verb class; neither do methods outside the table.

    Raises:
        ValidationError: If the method has no verb class
    """
    try:
        return _METHOD_VERBS[method.upper()]
    except KeyError:
        raise ValidationError(
            f"HTTP method {method} is not resource-scoped",
            error_code="unscoped_method",
        ) from None


@dataclass(frozen=True)
class Actor:
    """The authenticated caller, as seen by the resolver."""

    id: int
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    @classmethod
    def from_account(cls, account: Any) -> "Actor":
        """Build an actor from anything with ``id`` and ``role`` attributes."""
        return cls(id=account.id, role=Role(account.role))


class ShareableResource(Protocol):
    """What the resolver needs to know about a post or training."""

    id: int
    owner_id: int
    is_public: bool


class GrantFlags(Protocol):
    """Per-grantee permission flags."""

    can_view: bool
    can_edit: bool
    can_delete: bool


def grant_allows(grant: GrantFlags, verb: VerbClass) -> bool:
    """Return the grant flag that matches ``verb``."""
    if verb is VerbClass.READ:
        return grant.can_view
    if verb is VerbClass.UPDATE:
        return grant.can_edit
    return grant.can_delete
