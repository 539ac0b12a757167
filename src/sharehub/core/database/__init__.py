"""Database layer - session management, base models, and mixins."""

from sharehub.core.database.base import Base, CreatedAtMixin, IntIDMixin, TimestampMixin
from sharehub.core.database.session import (
    async_engine,
    async_session_factory,
    create_schema,
    get_db,
)


__all__ = [
    "Base",
    "CreatedAtMixin",
    "IntIDMixin",
    "TimestampMixin",
    "async_engine",
    "async_session_factory",
    "create_schema",
    "get_db",
]
