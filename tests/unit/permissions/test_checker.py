"""Unit tests for the request-scoped access checker.

Stores are AsyncMocks so the tests can see which lookups happen.
"""

from dataclasses import dataclass
from unittest.mock import AsyncMock

import pytest

from sharehub.core.errors import ForbiddenError, NotFoundError, ValidationError
from sharehub.core.permissions import AccessChecker, Actor, Role, VerbClass


pytestmark = pytest.mark.unit


@dataclass
class FakeResource:
    id: int
    owner_id: int
    is_public: bool = False


@dataclass
class FakeGrant:
    can_view: bool = True
    can_edit: bool = False
    can_delete: bool = False


def make_checker(resource: FakeResource | None, grant: FakeGrant | None = None):
    resources = AsyncMock()
    resources.get_by_id.return_value = resource
    grants = AsyncMock()
    grants.find.return_value = grant
    return AccessChecker(resources, grants, label="post"), resources, grants


class TestAuthorize:
    async def test_malformed_id_rejected_before_lookup(self):
        checker, resources, grants = make_checker(FakeResource(id=1, owner_id=7))

        with pytest.raises(ValidationError):
            await checker.authorize(Actor(id=7, role=Role.USER), "abc", VerbClass.READ)

        resources.get_by_id.assert_not_awaited()
        grants.find.assert_not_awaited()

    async def test_missing_resource_is_not_found(self):
        checker, _resources, grants = make_checker(None)

        with pytest.raises(NotFoundError) as exc_info:
            await checker.authorize(Actor(id=7, role=Role.USER), "12", VerbClass.READ)

        assert exc_info.value.message == "Post not found"
        grants.find.assert_not_awaited()

    async def test_owner_skips_grant_lookup(self):
        resource = FakeResource(id=3, owner_id=7)
        checker, resources, grants = make_checker(resource)

        result = await checker.authorize(
            Actor(id=7, role=Role.USER), "3", VerbClass.DELETE
        )

        assert result is resource
        resources.get_by_id.assert_awaited_once_with(3)
        grants.find.assert_not_awaited()

    async def test_admin_skips_grant_lookup(self):
        checker, _resources, grants = make_checker(FakeResource(id=3, owner_id=7))

        await checker.authorize(Actor(id=1, role=Role.ADMIN), "3", VerbClass.DELETE)

        grants.find.assert_not_awaited()

    async def test_public_read_skips_grant_lookup(self):
        checker, _resources, grants = make_checker(
            FakeResource(id=3, owner_id=7, is_public=True)
        )

        await checker.authorize(Actor(id=9, role=Role.USER), "3", VerbClass.READ)

        grants.find.assert_not_awaited()

    async def test_public_update_forbidden(self):
        checker, _resources, _grants = make_checker(
            FakeResource(id=3, owner_id=7, is_public=True)
        )

        with pytest.raises(ForbiddenError) as exc_info:
            await checker.authorize(Actor(id=9, role=Role.USER), "3", VerbClass.UPDATE)

        assert exc_info.value.message == "You can only view public posts"

    async def test_private_without_grant_forbidden(self):
        checker, _resources, grants = make_checker(FakeResource(id=3, owner_id=7))

        with pytest.raises(ForbiddenError) as exc_info:
            await checker.authorize(Actor(id=9, role=Role.USER), "3", VerbClass.READ)

        assert exc_info.value.error_code == "access_denied"
        grants.find.assert_awaited_once_with(3, 9)

    async def test_grant_allows_read_denies_delete(self):
        checker, _resources, grants = make_checker(
            FakeResource(id=3, owner_id=7), FakeGrant(can_view=True)
        )
        actor = Actor(id=9, role=Role.USER)

        await checker.authorize(actor, "3", VerbClass.READ)
        with pytest.raises(ForbiddenError):
            await checker.authorize(actor, "3", VerbClass.DELETE)

        # One lookup per check
        assert grants.find.await_count == 2
