"""Async database session and engine configuration."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from songvote.models.base import Base


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create the async engine for a database URL.

    In-memory SQLite gets a StaticPool so every session shares the one
    connection that holds the schema.
    """
    engine_kwargs: dict = {"echo": echo}
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        engine_kwargs["poolclass"] = StaticPool
    return create_async_engine(database_url, **engine_kwargs)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet."""
    # Import models so they register with Base.metadata
    from songvote.models import item, song_rating, user_rating  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
