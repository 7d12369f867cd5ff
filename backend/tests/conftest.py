"""
Faithtrack Backend: Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets a fresh in-memory SQLite database (aiosqlite) with
       all tables created from the ORM metadata. No PostgreSQL and no
       network access are needed.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── db_engine:        In-memory async engine with the schema created
    ├── db_session:       AsyncSession bound to db_engine
    ├── mock_db_session:  AsyncMock session for error-path tests
    ├── make_token:       Builds signed bearer tokens for a user id
    └── test_client:      HTTPX AsyncClient wired to the app and db_engine
"""

import os

# Override settings for testing BEFORE any faithtrack imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["AUTH_SECRET_KEY"] = "test-secret-not-real"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime, timedelta, timezone  # noqa: E402
from typing import AsyncGenerator  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from jose import jwt  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from faithtrack.config import settings  # noqa: E402
from faithtrack.database import Base, get_db_session  # noqa: E402

# Register every table with Base.metadata
from faithtrack.models.devotional import Devotional  # noqa: E402,F401
from faithtrack.models.journal import JournalEntry  # noqa: E402,F401
from faithtrack.models.prayer import Prayer  # noqa: E402,F401
from faithtrack.models.prayer_wall import PrayerWallPost  # noqa: E402,F401
from faithtrack.models.search_history import SearchHistoryRecord  # noqa: E402,F401


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    In-memory SQLite engine holding the full schema.

    StaticPool keeps a single connection so every session in the test sees
    the same in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """
    A session for service-level tests.

    Usage:
        async def test_create(db_session):
            prayer_id = await prayer_service.create_prayer(db_session, "user-1", payload)
    """
    async with session_factory() as session:
        yield session


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.side_effect = SQLAlchemyError("boom")
        with pytest.raises(DatabaseError):
            await prayer_service.list_prayers(mock_db_session, "user-1")
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.delete = AsyncMock()
    session.refresh = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Identity Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def make_token():
    """
    Returns a function that signs a bearer token for a user id.

    Usage:
        headers = {"Authorization": f"Bearer {make_token('user-1')}"}
    """

    def _make_token(sub="user-1", secret=None, expires_in=timedelta(hours=1), **claims):
        payload = {"exp": datetime.now(timezone.utc) + expires_in, **claims}
        if sub is not None:
            payload["sub"] = sub
        return jwt.encode(
            payload,
            secret or settings.auth_secret_key,
            algorithm=settings.auth_algorithm,
        )

    return _make_token


@pytest.fixture
def auth_headers(make_token):
    """Returns a function building Authorization headers for a user id."""

    def _auth_headers(user_id="user-1"):
        return {"Authorization": f"Bearer {make_token(user_id)}"}

    return _auth_headers


# ══════════════════════════════════════════════════════════════════════════
# API Client
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient talking to the FastAPI app through ASGITransport.

    The app's session dependency is replaced with one bound to the test
    engine; commit/rollback semantics match get_db_session.
    """
    from faithtrack.main import app

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
