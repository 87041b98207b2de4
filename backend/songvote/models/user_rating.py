"""UserRating model for tracking per-user song votes."""

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from songvote.models.base import Base, CreatedAtMixin, IntegerPrimaryKeyMixin


class UserRating(IntegerPrimaryKeyMixin, CreatedAtMixin, Base):
    """Tracks which user voted on which song to prevent duplicates."""

    __tablename__ = "user_ratings"

    song_key: Mapped[str] = mapped_column(String, nullable=False)
    user_id: Mapped[str] = mapped_column(
        String, nullable=False,
        comment="Opaque client-generated id"
    )
    rating_type: Mapped[str] = mapped_column(
        String(4), nullable=False,
        comment="'up' or 'down'"
    )

    __table_args__ = (
        UniqueConstraint("song_key", "user_id", name="uq_user_song_rating"),
    )

    def __repr__(self) -> str:
        return f"<UserRating(user={self.user_id}, song={self.song_key}, type={self.rating_type})>"
