"""SQLAlchemy models for SongVote.

All models are imported here so they register with Base.metadata.
"""

from songvote.models.base import Base, CreatedAtMixin, IntegerPrimaryKeyMixin, TimestampMixin
from songvote.models.item import Item
from songvote.models.song_rating import SongRating
from songvote.models.user_rating import UserRating

__all__ = [
    "Base",
    "CreatedAtMixin",
    "IntegerPrimaryKeyMixin",
    "TimestampMixin",
    "Item",
    "SongRating",
    "UserRating",
]
