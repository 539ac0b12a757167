"""Pytest configuration and shared fixtures."""

import os


# Settings are read at import time; point them at throwaway values first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("AWS_BUCKET_NAME", "sharehub-test")

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from sharehub.core.auth.backend import create_access_token, hash_password  # noqa: E402
from sharehub.core.database import Base, get_db  # noqa: E402
from sharehub.core.permissions import Role  # noqa: E402
from sharehub.core.storage import get_storage  # noqa: E402
from sharehub.main import create_app  # noqa: E402
from sharehub.modules import load_models  # noqa: E402
from sharehub.modules.accounts.models import Account  # noqa: E402
from sharehub.modules.categories.models import Category  # noqa: E402
from tests.factories.account import AccountSeedFactory  # noqa: E402
from tests.fakes import InMemoryStorage  # noqa: E402


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_PASSWORD = "testpassword123"

load_models()


def _enable_sqlite_transactions(engine: AsyncEngine) -> None:
    """Let SQLAlchemy own BEGIN/SAVEPOINT and turn on foreign keys."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection, _record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def on_begin(conn):
        conn.exec_driver_sql("BEGIN")


@pytest.fixture(scope="session")
def password_hash() -> str:
    """Hash of TEST_PASSWORD, computed once per run."""
    return hash_password(TEST_PASSWORD)


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database for one test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    _enable_sqlite_transactions(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Provide the database session shared by the test and the app."""
    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
async def app(db: AsyncSession, storage: InMemoryStorage):
    """Create test application instance."""
    application = create_app()

    # Override database dependency
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    application.dependency_overrides[get_db] = override_get_db
    application.dependency_overrides[get_storage] = lambda: storage

    yield application

    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


# ============================================================
# Account and Category Fixtures
# ============================================================


async def make_account(
    db: AsyncSession,
    password_hash: str,
    role: Role = Role.USER,
    **overrides,
) -> Account:
    """Persist an account built from factory data."""
    seed = AccountSeedFactory.build(**overrides)
    account = Account(
        email=seed.email,
        name=seed.name,
        password_hash=password_hash,
        role=role,
    )
    db.add(account)
    await db.flush()
    await db.refresh(account)
    return account


def bearer(account: Account) -> dict[str, str]:
    """Authorization header carrying a valid access token for ``account``."""
    token = create_access_token(account.id, account.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def owner(db: AsyncSession, password_hash: str) -> Account:
    return await make_account(db, password_hash, name="Owner")


@pytest.fixture
async def other_user(db: AsyncSession, password_hash: str) -> Account:
    return await make_account(db, password_hash, name="Other")


@pytest.fixture
async def admin(db: AsyncSession, password_hash: str) -> Account:
    return await make_account(db, password_hash, role=Role.ADMIN, name="Admin")


@pytest.fixture
async def category(db: AsyncSession) -> Category:
    category = Category(name="Safety")
    db.add(category)
    await db.flush()
    await db.refresh(category)
    return category
