"""SongRating model holding per-song vote totals."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from songvote.models.base import Base, IntegerPrimaryKeyMixin, TimestampMixin


class SongRating(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    """Running thumbs up/down totals for one song key.

    Created lazily on the first vote for a song and never deleted.
    """

    __tablename__ = "song_ratings"

    song_key: Mapped[str] = mapped_column(
        String, nullable=False, unique=True,
        comment="base64(artist + '|||' + title)"
    )
    artist: Mapped[str] = mapped_column(String, nullable=False)
    title: Mapped[str] = mapped_column(String, nullable=False)
    thumbs_up: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0"
    )
    thumbs_down: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0"
    )

    def __repr__(self) -> str:
        return (
            f"<SongRating(song_key='{self.song_key}', "
            f"up={self.thumbs_up}, down={self.thumbs_down})>"
        )
