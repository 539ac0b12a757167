"""Async database session management."""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from sharehub.config import settings


def _engine_options(url: str) -> dict[str, Any]:
    """Pool options for the configured backend.

    SQLite (used for local runs and tests) ignores connection pooling knobs.
    """
    options: dict[str, Any] = {"echo": settings.database_echo}
    if url.startswith("postgresql"):
        options.update(
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_pre_ping=True,  # Verify connections before use
        )
    return options


# Create async engine
async_engine = create_async_engine(
    settings.async_database_url,
    **_engine_options(settings.async_database_url),
)

# Create async session factory
async_session_factory = async_sessionmaker(
    bind=async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that provides a database session.

    The session is committed when the request handler returns and rolled
    back if it raises.

    Usage:
        @router.get("/items")
        async def list_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def create_schema() -> None:
    """Create all tables registered on the declarative metadata."""
    from sharehub.core.database.base import Base  # noqa: PLC0415
    from sharehub.modules import load_models  # noqa: PLC0415

    load_models()
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
