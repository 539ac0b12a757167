"""Integration tests for auth endpoints."""

import pytest
from httpx import AsyncClient

from tests.conftest import TEST_PASSWORD, bearer


pytestmark = pytest.mark.integration


class TestSignup:
    async def test_signup_success(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/auth/signup",
            json={"email": "new@example.com", "password": "SecurePass123", "name": "New"},
        )

        assert response.status_code == 201
        assert isinstance(response.json()["id"], int)

    async def test_signup_duplicate_email(self, client: AsyncClient, owner):
        response = await client.post(
            "/api/v1/auth/signup",
            json={"email": owner.email, "password": "SecurePass123", "name": "Again"},
        )

        assert response.status_code == 409

    async def test_signup_missing_field_is_400(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/auth/signup",
            json={"email": "new@example.com", "password": "SecurePass123"},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["title"] == "Validation Error"
        assert any(error["field"] == "name" for error in data["errors"])


class TestLogin:
    async def test_login_and_use_token(self, client: AsyncClient, owner):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": owner.email, "password": TEST_PASSWORD},
        )

        assert response.status_code == 200
        token = response.json()["access_token"]

        me = await client.get(
            "/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"}
        )
        assert me.status_code == 200
        assert me.json()["email"] == owner.email
        assert me.json()["role"] == "USER"

    async def test_wrong_password(self, client: AsyncClient, owner):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": owner.email, "password": "not-the-password"},
        )

        assert response.status_code == 401

    async def test_unknown_email(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "ghost@example.com", "password": TEST_PASSWORD},
        )

        assert response.status_code == 401


class TestSession:
    async def test_authenticated(self, client: AsyncClient, admin):
        response = await client.get("/api/v1/auth/authenticated", headers=bearer(admin))

        assert response.json() == {"is_authenticated": True, "role": "ADMIN"}

    async def test_missing_token(self, client: AsyncClient):
        response = await client.get("/api/v1/auth/me")

        assert response.status_code == 401
        assert response.json()["status"] == 401

    async def test_garbage_token(self, client: AsyncClient):
        response = await client.get(
            "/api/v1/auth/me", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401

    async def test_request_id_echoed(self, client: AsyncClient):
        response = await client.get("/health/live", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"
