"""Rating store: song vote totals and per-user vote records.

The store owns the ``song_ratings`` and ``user_ratings`` tables. Each public
operation runs in its own session; ``cast_vote`` runs the duplicate check,
the vote insert and the counter update inside a single transaction so a
failure at any step leaves nothing behind.
"""

from typing import Dict, Optional

import structlog
from sqlalchemy import func, select, update
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from songvote.core.exceptions import DuplicateVoteError, InvalidRequestError, StorageError
from songvote.models.song_rating import SongRating
from songvote.models.user_rating import UserRating

logger = structlog.get_logger(__name__)

RATING_TYPES = ("up", "down")


def _empty_counts() -> Dict[str, int]:
    return {"thumbs_up": 0, "thumbs_down": 0}


def _is_duplicate_vote(error: IntegrityError) -> bool:
    """True if the error is the (song_key, user_id) unique index on user_ratings."""
    message = str(error.orig)
    return "UNIQUE" in message and "user_ratings.user_id" in message


class RatingStore:
    """Reads and writes song ratings through an injected session factory."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory
        self.logger = logger.bind(service="rating_store")

    async def get_aggregate(self, song_key: str) -> Dict[str, int]:
        """Get vote totals for a song.

        Returns:
            Dict with thumbs_up and thumbs_down; both 0 if nobody has voted
        """
        try:
            async with self.session_factory() as session:
                return await self._read_counts(session, song_key)
        except SQLAlchemyError as e:
            self.logger.error("aggregate_read_failed", song_key=song_key, error=str(e))
            raise StorageError(str(e)) from e

    async def cast_vote(
        self,
        song_key: str,
        artist: str,
        title: str,
        rating_type: str,
        user_id: str,
    ) -> Dict[str, int]:
        """Record one user's vote on a song and bump the matching counter.

        Args:
            song_key: Encoded song identifier
            artist: Artist name, stored when the song row is first created
            title: Song title, stored when the song row is first created
            rating_type: Either "up" or "down"
            user_id: Client-generated user id

        Returns:
            Post-increment thumbs_up/thumbs_down totals

        Raises:
            DuplicateVoteError: If the user already voted on this song
            StorageError: On any other database failure
        """
        if rating_type not in RATING_TYPES:
            raise InvalidRequestError("rating_type must be 'up' or 'down'")

        try:
            async with self.session_factory.begin() as session:
                if await self._has_voted(session, song_key, user_id):
                    raise DuplicateVoteError()

                # A concurrent vote from the same user fails here on the
                # unique constraint and rolls the whole unit back.
                session.add(
                    UserRating(song_key=song_key, user_id=user_id, rating_type=rating_type)
                )
                try:
                    await session.flush()
                except IntegrityError as e:
                    if not _is_duplicate_vote(e):
                        raise
                    raise DuplicateVoteError() from e

                await self._ensure_song_row(session, song_key, artist, title)

                counter = SongRating.thumbs_up if rating_type == "up" else SongRating.thumbs_down
                await session.execute(
                    update(SongRating)
                    .where(SongRating.song_key == song_key)
                    .values({counter: counter + 1, SongRating.updated_at: func.now()})
                )

                counts = await self._read_counts(session, song_key)
        except DuplicateVoteError:
            self.logger.info("duplicate_vote_rejected", song_key=song_key, user_id=user_id)
            raise
        except SQLAlchemyError as e:
            self.logger.error("vote_failed", song_key=song_key, user_id=user_id, error=str(e))
            raise StorageError(str(e)) from e

        self.logger.info(
            "vote_cast",
            song_key=song_key,
            user_id=user_id,
            rating_type=rating_type,
            thumbs_up=counts["thumbs_up"],
            thumbs_down=counts["thumbs_down"],
        )
        return counts

    async def get_user_vote(self, song_key: str, user_id: str) -> Optional[str]:
        """Get a user's vote type for a song, or None if they have not voted."""
        try:
            async with self.session_factory() as session:
                result = await session.execute(
                    select(UserRating.rating_type).where(
                        UserRating.song_key == song_key,
                        UserRating.user_id == user_id,
                    )
                )
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(
                "user_vote_read_failed", song_key=song_key, user_id=user_id, error=str(e)
            )
            raise StorageError(str(e)) from e

    async def _has_voted(self, session: AsyncSession, song_key: str, user_id: str) -> bool:
        result = await session.execute(
            select(UserRating.id).where(
                UserRating.song_key == song_key,
                UserRating.user_id == user_id,
            )
        )
        return result.scalar_one_or_none() is not None

    async def _read_counts(self, session: AsyncSession, song_key: str) -> Dict[str, int]:
        result = await session.execute(
            select(SongRating.thumbs_up, SongRating.thumbs_down).where(
                SongRating.song_key == song_key
            )
        )
        row = result.one_or_none()
        if row is None:
            return _empty_counts()
        return {"thumbs_up": row.thumbs_up, "thumbs_down": row.thumbs_down}

    async def _ensure_song_row(
        self, session: AsyncSession, song_key: str, artist: str, title: str
    ) -> None:
        """Insert a zeroed song row unless one already exists."""
        stmt = (
            sqlite_insert(SongRating)
            .values(song_key=song_key, artist=artist, title=title, thumbs_up=0, thumbs_down=0)
            .on_conflict_do_nothing(index_elements=["song_key"])
        )
        await session.execute(stmt)
