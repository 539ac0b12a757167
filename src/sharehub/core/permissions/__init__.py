"""Access control for shareable resources and admin-only operations."""

from sharehub.core.permissions.checker import AccessChecker, GrantStore, ResourceStore
from sharehub.core.permissions.guards import (
    ensure_admin,
    ensure_category_unused,
    ensure_not_self_demotion,
    ensure_owner_or_admin,
)
from sharehub.core.permissions.resolver import (
    AccessDecision,
    is_allowed,
    needs_grant,
    resolve,
)
from sharehub.core.permissions.types import (
    Actor,
    GrantFlags,
    Role,
    ShareableResource,
    VerbClass,
    grant_allows,
    verb_class_for_method,
)


__all__ = [
    # Checker
    "AccessChecker",
    # Resolver
    "AccessDecision",
    # Types
    "Actor",
    "GrantFlags",
    "GrantStore",
    "ResourceStore",
    "Role",
    "ShareableResource",
    "VerbClass",
    # Guards
    "ensure_admin",
    "ensure_category_unused",
    "ensure_not_self_demotion",
    "ensure_owner_or_admin",
    "grant_allows",
    "is_allowed",
    "needs_grant",
    "resolve",
    "verb_class_for_method",
]
