"""Verify SongVote setup and configuration.

This script checks that all components are properly configured:
- Database connection
- Required tables
- Current rating totals

Usage:
    python scripts/verify_setup.py
"""

import asyncio
import sys

from sqlalchemy import func, select, text

from songvote.config import settings
from songvote.db.session import build_engine, build_session_factory, create_tables
from songvote.models import Item, SongRating, UserRating

REQUIRED_TABLES = ["items", "song_ratings", "user_ratings"]


async def verify_database_connection(session_factory):
    """Verify database connection is working."""
    try:
        async with session_factory() as session:
            result = await session.execute(text("SELECT sqlite_version()"))
            print(f"    SQLite version: {result.scalar()}")
            return True
    except Exception as e:
        print(f"    Error: {e}")
        return False


async def verify_tables(session_factory):
    """Verify all required tables exist."""
    all_ok = True

    async with session_factory() as session:
        result = await session.execute(
            text("SELECT name FROM sqlite_master WHERE type = 'table'")
        )
        existing = set(result.scalars().all())

    for table in REQUIRED_TABLES:
        if table in existing:
            print(f"    OK  {table}")
        else:
            print(f"    MISSING  {table}")
            all_ok = False

    return all_ok


async def show_totals(session_factory):
    """Print row counts and overall vote totals."""
    async with session_factory() as session:
        songs = (await session.execute(select(func.count()).select_from(SongRating))).scalar_one()
        votes = (await session.execute(select(func.count()).select_from(UserRating))).scalar_one()
        items = (await session.execute(select(func.count()).select_from(Item))).scalar_one()
        up, down = (
            await session.execute(
                select(
                    func.coalesce(func.sum(SongRating.thumbs_up), 0),
                    func.coalesce(func.sum(SongRating.thumbs_down), 0),
                )
            )
        ).one()

    print(f"    Songs rated: {songs}")
    print(f"    User votes:  {votes} (up {up} / down {down})")
    print(f"    Items:       {items}")


async def main():
    print("\n" + "=" * 70)
    print("  SongVote Setup Verification")
    print("=" * 70)
    print(f"\n  Database: {settings.DATABASE_URL}")

    engine = build_engine(settings.DATABASE_URL)
    session_factory = build_session_factory(engine)

    try:
        print("\n[1] Database connection")
        if not await verify_database_connection(session_factory):
            return 1

        print("\n[2] Tables")
        if not await verify_tables(session_factory):
            print("    Creating missing tables...")
            await create_tables(engine)
            if not await verify_tables(session_factory):
                return 1

        print("\n[3] Ratings")
        await show_totals(session_factory)
    finally:
        await engine.dispose()

    print("\nAll checks passed. Start the backend with: uvicorn songvote.main:app --reload\n")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
