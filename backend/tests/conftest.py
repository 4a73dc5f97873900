"""
Rural Sports Backend: Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the whole suite.
How:   Environment variables are set at the top of this module, before any
       `app` import, so the settings singleton, the engine and the service
       singletons are built for tests (SQLite, temp storage, fake Gemini key).

Fixtures (all function-scoped):
    ├── mock_db_session:    AsyncMock standing in for AsyncSession
    ├── db_engine:          fresh SQLite file with every table created
    ├── db_session:         real AsyncSession on that engine
    ├── client:             httpx AsyncClient on the app, get_db_session
    │                       overridden to use db_engine
    ├── session_user:       a registered + logged-in user (JSON)
    ├── authed_client:      `client` carrying that user's session cookie
    ├── temp_storage:       empty directory for file tests
    └── sample_image_bytes: smallest JPEG that passes content sniffing
"""

import os
import tempfile

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup (before any app import)
# ══════════════════════════════════════════════════════════════════════════

_TEST_DIR = tempfile.mkdtemp(prefix="ruralsports_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/app.db"
os.environ["SESSION_SECRET"] = "test-session-secret-with-enough-length-for-hs256"
os.environ["GEMINI_API_KEY"] = "test-key-not-real"
os.environ["STORAGE_ROOT"] = os.path.join(_TEST_DIR, "storage")
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["RATE_LIMIT_REQUESTS"] = "100000"

from typing import AsyncGenerator  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

import app.models  # noqa: E402,F401
from app.database import Base, get_db_session  # noqa: E402

TEST_USER = {
    "username": "lihua",
    "password": "s3cret-pass",
    "realName": "Li Hua",
    "villageName": "Maple Creek",
    "phone": "13800000000",
}


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    AsyncMock standing in for AsyncSession.

    Usage:
        mock_db_session.get.return_value = None
        with pytest.raises(NotFoundError):
            await event_service.get(mock_db_session, 42)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.delete = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


# ══════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def client(db_engine) -> AsyncGenerator[AsyncClient, None]:
    """
    Async HTTP client on the real app, one database per test.

    Usage:
        async def test_health(client):
            response = await client.get("/health")
    """
    from app.main import app

    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.pop(get_db_session, None)


@pytest_asyncio.fixture
async def session_user(client) -> dict:
    """Registers TEST_USER and logs in; the session cookie stays on `client`."""
    response = await client.post("/api/users/register", json=TEST_USER)
    assert response.status_code == 201, response.text

    response = await client.post(
        "/api/login",
        data={"username": TEST_USER["username"], "password": TEST_USER["password"]},
    )
    assert response.status_code == 200, response.text
    return response.json()


@pytest_asyncio.fixture
async def authed_client(client, session_user) -> AsyncClient:
    return client


# ══════════════════════════════════════════════════════════════════════════
# File Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def temp_storage(tmp_path):
    storage_dir = tmp_path / "storage"
    storage_dir.mkdir()
    return str(storage_dir)


@pytest.fixture
def sample_image_bytes():
    """
    Minimal JPEG: Start of Image (FFD8) + JFIF APP0 header + End of Image (FFD9).

    Not a decodable picture, but libmagic identifies it as image/jpeg.
    """
    return (
        b'\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00'
        b'\xff\xd9'
    )
