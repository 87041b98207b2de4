"""Pytest configuration and shared fixtures."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from songvote.config import Settings
from songvote.db.session import build_engine, build_session_factory, create_tables
from songvote.main import create_app
from songvote.services.rating_store import RatingStore


@pytest.fixture
def anyio_backend():
    """Use asyncio as the async backend for tests."""
    return "asyncio"


@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite database for testing."""
    engine = build_engine("sqlite+aiosqlite:///:memory:")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(test_engine)


@pytest_asyncio.fixture
async def test_db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def rating_store(session_factory) -> RatingStore:
    return RatingStore(session_factory)


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        ENVIRONMENT="test",
        DEBUG=False,
        STATIC_DIR=str(tmp_path / "no-static"),
    )


@pytest.fixture
def test_app(test_settings, test_engine):
    return create_app(settings=test_settings, engine=test_engine)


@pytest_asyncio.fixture
async def client(test_app):
    """HTTP client bound to the app; tables already exist on test_engine."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def file_rating_store(tmp_path):
    """Rating store on a file-backed SQLite database with a real connection pool."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'ratings.db'}")
    await create_tables(engine)
    yield RatingStore(build_session_factory(engine))
    await engine.dispose()
