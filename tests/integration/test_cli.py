"""Tests for the sharehub command line."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from typer.testing import CliRunner

from sharehub import cli
from sharehub.cli import app, ensure_admin_account, ensure_category
from sharehub.core.auth.backend import verify_password
from sharehub.core.permissions import Role


runner = CliRunner()


class TestCommands:
    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.stdout

    def test_seed_admin_created(self, monkeypatch):
        seed = AsyncMock(return_value=(SimpleNamespace(email="root@example.com"), True))
        monkeypatch.setattr(cli, "_seed_admin", seed)

        result = runner.invoke(
            app, ["seed-admin", "--email", "root@example.com", "--password", "s3cretpass"]
        )

        assert result.exit_code == 0
        assert "Administrator created" in result.stdout
        seed.assert_awaited_once_with("root@example.com", "Admin User", "s3cretpass")

    def test_seed_admin_existing(self, monkeypatch):
        seed = AsyncMock(return_value=(SimpleNamespace(email="old@example.com"), False))
        monkeypatch.setattr(cli, "_seed_admin", seed)

        result = runner.invoke(app, ["seed-admin", "--password", "s3cretpass"])

        assert result.exit_code == 0
        assert "already exists" in result.stdout

    def test_seed_category_default_name(self, monkeypatch):
        seed = AsyncMock(return_value=(SimpleNamespace(name="Example Category"), True))
        monkeypatch.setattr(cli, "_seed_category", seed)

        result = runner.invoke(app, ["seed-category"])

        assert result.exit_code == 0
        seed.assert_awaited_once_with("Example Category")

    def test_seed_category_blank(self):
        result = runner.invoke(app, ["seed-category", "  "])

        assert result.exit_code == 1

    def test_init_db(self, monkeypatch):
        create = AsyncMock()
        monkeypatch.setattr(cli, "create_schema", create)

        result = runner.invoke(app, ["init-db"])

        assert result.exit_code == 0
        create.assert_awaited_once()


class TestSeeding:
    async def test_creates_first_admin(self, db):
        account, created = await ensure_admin_account(db, "root@example.com", "Root", "s3cretpass")

        assert created is True
        assert account.role is Role.ADMIN
        assert verify_password("s3cretpass", account.password_hash)

    async def test_existing_admin_kept(self, db, admin):
        account, created = await ensure_admin_account(db, "root@example.com", "Root", "s3cretpass")

        assert created is False
        assert account.id == admin.id

    async def test_existing_user_promoted(self, db, owner):
        account, created = await ensure_admin_account(db, owner.email, "Ignored", "s3cretpass")

        assert created is True
        assert account.id == owner.id
        assert account.role is Role.ADMIN

    async def test_category_once(self, db):
        first, created_first = await ensure_category(db, "Example Category")
        second, created_second = await ensure_category(db, "example category")

        assert created_first is True
        assert created_second is False
        assert first.id == second.id
