"""FastAPI dependency injection providers."""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from songvote.services.rating_store import RatingStore


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session for request-scoped usage.

    The session is automatically committed on success or rolled back on error.
    Always closed after the request completes.
    """
    async with request.app.state.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


def get_rating_store(request: Request) -> RatingStore:
    """Return the rating store built for this application instance."""
    return request.app.state.rating_store
