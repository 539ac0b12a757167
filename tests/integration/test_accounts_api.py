"""Integration tests for account role management."""

import pytest
from httpx import AsyncClient

from tests.conftest import bearer


pytestmark = pytest.mark.integration


class TestListAccounts:
    async def test_admin_lists(self, client: AsyncClient, admin, owner):
        response = await client.get("/api/v1/accounts", headers=bearer(admin))

        assert response.status_code == 200
        emails = {account["email"] for account in response.json()}
        assert {admin.email, owner.email} <= emails

    async def test_user_forbidden(self, client: AsyncClient, owner):
        response = await client.get("/api/v1/accounts", headers=bearer(owner))

        assert response.status_code == 403


class TestPromoteDemote:
    async def test_promote_then_demote(self, client: AsyncClient, admin, owner):
        promoted = await client.patch(
            f"/api/v1/accounts/{owner.id}/promote", headers=bearer(admin)
        )
        assert promoted.status_code == 200
        assert promoted.json()["user"]["role"] == "ADMIN"

        demoted = await client.patch(
            f"/api/v1/accounts/{owner.id}/demote", headers=bearer(admin)
        )
        assert demoted.status_code == 200
        assert demoted.json()["user"]["role"] == "USER"

    async def test_self_demotion_conflicts(self, client: AsyncClient, admin):
        response = await client.patch(
            f"/api/v1/accounts/{admin.id}/demote", headers=bearer(admin)
        )

        assert response.status_code == 409
        assert response.json()["detail"] == "cannot self-demote"

    async def test_unknown_account(self, client: AsyncClient, admin):
        response = await client.patch("/api/v1/accounts/9999/promote", headers=bearer(admin))

        assert response.status_code == 404

    async def test_malformed_id(self, client: AsyncClient, admin):
        response = await client.patch("/api/v1/accounts/abc/promote", headers=bearer(admin))

        assert response.status_code == 400

    async def test_user_cannot_promote(self, client: AsyncClient, owner, other_user):
        response = await client.patch(
            f"/api/v1/accounts/{other_user.id}/promote", headers=bearer(owner)
        )

        assert response.status_code == 403

    async def test_demoted_admin_loses_access_with_old_token(
        self, client: AsyncClient, admin, owner
    ):
        """The role is read from the database, not from the token."""
        await client.patch(f"/api/v1/accounts/{owner.id}/promote", headers=bearer(admin))
        headers_while_admin = bearer(owner)
        await client.patch(f"/api/v1/accounts/{owner.id}/demote", headers=bearer(admin))

        response = await client.get("/api/v1/accounts", headers=headers_while_admin)

        assert response.status_code == 403
