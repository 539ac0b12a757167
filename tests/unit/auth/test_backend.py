"""Unit tests for auth backend (JWT and password handling)."""

from datetime import timedelta

import pytest
from jose import jwt

from sharehub.config import settings
from sharehub.core.auth.backend import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from sharehub.core.permissions import Role


pytestmark = pytest.mark.unit


class TestPasswordHashing:
    """Tests for password hashing functions."""

    def test_hash_password_returns_hash(self):
        """hash_password should return a bcrypt hash."""
        hashed = hash_password("mysecretpassword")

        assert hashed != "mysecretpassword"
        assert hashed.startswith("$2b$")  # bcrypt prefix

    def test_verify_password_correct(self):
        hashed = hash_password("mysecretpassword")

        assert verify_password("mysecretpassword", hashed) is True

    def test_verify_password_incorrect(self):
        hashed = hash_password("mysecretpassword")

        assert verify_password("wrongpassword", hashed) is False


class TestAccessToken:
    """Tests for JWT creation and decoding."""

    def test_claims(self):
        token = create_access_token(12, Role.ADMIN)

        payload = jwt.decode(token, settings.secret_key, algorithms=["HS256"])
        assert payload["sub"] == "12"
        assert payload["role"] == "ADMIN"
        assert payload["type"] == "access"

    def test_round_trip(self):
        token_data = decode_token(create_access_token(12, Role.USER))

        assert token_data is not None
        assert token_data.account_id == 12
        assert token_data.role is Role.USER

    def test_expired_token_rejected(self):
        token = create_access_token(12, Role.USER, expires_delta=timedelta(seconds=-1))

        assert decode_token(token) is None

    def test_tampered_token_rejected(self):
        token = create_access_token(12, Role.USER)

        assert decode_token(token[:-2] + "xx") is None

    def test_wrong_secret_rejected(self):
        token = jwt.encode(
            {"sub": "12", "role": "ADMIN", "exp": 4102444800},
            "another-secret-that-is-also-long-enough",
            algorithm="HS256",
        )

        assert decode_token(token) is None

    def test_unknown_role_rejected(self):
        token = jwt.encode(
            {"sub": "12", "role": "ROOT", "exp": 4102444800},
            settings.secret_key,
            algorithm=settings.jwt_algorithm,
        )

        assert decode_token(token) is None
