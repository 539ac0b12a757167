"""Accounts module - role management for administrators."""

from sharehub.modules.accounts.routes import router


__all__ = ["router"]
