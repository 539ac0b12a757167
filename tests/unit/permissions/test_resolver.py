"""Unit tests for the access resolver decision table."""

from dataclasses import dataclass

import pytest

from sharehub.core.permissions import (
    AccessDecision,
    Actor,
    Role,
    VerbClass,
    is_allowed,
    needs_grant,
    resolve,
)
from sharehub.core.permissions.resolver import (
    ADMIN,
    GRANT,
    GRANT_MISSING_FLAG,
    NO_GRANT,
    OWNER,
    PUBLIC_READ,
    PUBLIC_READ_ONLY,
)


pytestmark = pytest.mark.unit

ALL_VERBS = list(VerbClass)


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


OWNER_ACTOR = Actor(id=7, role=Role.USER)
STRANGER = Actor(id=9, role=Role.USER)
ADMIN_ACTOR = Actor(id=1, role=Role.ADMIN)


class TestRuleOrder:
    """Each rule, in the order it is applied."""

    @pytest.mark.parametrize("verb", ALL_VERBS)
    def test_admin_allowed_everything(self, verb: VerbClass):
        resource = FakeResource(id=1, owner_id=7)

        assert resolve(ADMIN_ACTOR, resource, verb) == AccessDecision(True, ADMIN)

    @pytest.mark.parametrize("verb", ALL_VERBS)
    @pytest.mark.parametrize("is_public", [True, False])
    def test_owner_allowed_everything(self, verb: VerbClass, is_public: bool):
        resource = FakeResource(id=1, owner_id=7, is_public=is_public)
        useless_grant = FakeGrant(can_view=False)

        decision = resolve(OWNER_ACTOR, resource, verb, useless_grant)

        assert decision == AccessDecision(True, OWNER)

    def test_public_readable_by_anyone(self):
        resource = FakeResource(id=1, owner_id=7, is_public=True)

        assert resolve(STRANGER, resource, VerbClass.READ) == AccessDecision(
            True, PUBLIC_READ
        )

    @pytest.mark.parametrize("verb", [VerbClass.UPDATE, VerbClass.DELETE])
    def test_public_not_writable_by_others(self, verb: VerbClass):
        resource = FakeResource(id=1, owner_id=7, is_public=True)

        assert resolve(STRANGER, resource, verb) == AccessDecision(
            False, PUBLIC_READ_ONLY
        )

    def test_public_rule_wins_over_grant(self):
        """A grant with every flag does not widen a public resource."""
        resource = FakeResource(id=1, owner_id=7, is_public=True)
        full_grant = FakeGrant(can_view=True, can_edit=True, can_delete=True)

        assert not is_allowed(STRANGER, resource, VerbClass.DELETE, full_grant)

    @pytest.mark.parametrize("verb", ALL_VERBS)
    def test_private_without_grant_denied(self, verb: VerbClass):
        resource = FakeResource(id=1, owner_id=7)

        assert resolve(STRANGER, resource, verb) == AccessDecision(False, NO_GRANT)


class TestGrantFlags:
    """Rule 4: the flag matching the verb class decides."""

    @pytest.mark.parametrize(
        ("grant", "verb", "expected"),
        [
            (FakeGrant(True, False, False), VerbClass.READ, True),
            (FakeGrant(True, False, False), VerbClass.UPDATE, False),
            (FakeGrant(True, False, False), VerbClass.DELETE, False),
            (FakeGrant(False, True, False), VerbClass.READ, False),
            (FakeGrant(False, True, False), VerbClass.UPDATE, True),
            (FakeGrant(False, False, True), VerbClass.DELETE, True),
            (FakeGrant(False, False, False), VerbClass.READ, False),
        ],
    )
    def test_flag_decides(self, grant: FakeGrant, verb: VerbClass, expected: bool):
        resource = FakeResource(id=1, owner_id=7)

        decision = resolve(STRANGER, resource, verb, grant)

        assert decision.allowed is expected
        assert decision.reason == (GRANT if expected else GRANT_MISSING_FLAG)


class TestNeedsGrant:
    def test_not_needed_for_admin(self):
        assert not needs_grant(ADMIN_ACTOR, FakeResource(id=1, owner_id=7))

    def test_not_needed_for_owner(self):
        assert not needs_grant(OWNER_ACTOR, FakeResource(id=1, owner_id=7))

    def test_not_needed_for_public(self):
        assert not needs_grant(STRANGER, FakeResource(id=1, owner_id=7, is_public=True))

    def test_needed_for_private_non_owner(self):
        assert needs_grant(STRANGER, FakeResource(id=1, owner_id=7))


class TestExamples:
    def test_owner_deletes_own_private(self):
        assert is_allowed(OWNER_ACTOR, FakeResource(id=3, owner_id=7), VerbClass.DELETE)

    def test_view_grant_reads_but_cannot_delete(self):
        resource = FakeResource(id=3, owner_id=7)
        grant = FakeGrant(can_view=True)

        assert is_allowed(STRANGER, resource, VerbClass.READ, grant)
        assert not is_allowed(STRANGER, resource, VerbClass.DELETE, grant)
