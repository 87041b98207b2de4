"""Pydantic schemas for the SongVote API.

All request/response models are defined here for easy import.
"""

from songvote.schemas.common import ErrorResponse
from songvote.schemas.health import HealthCheckResponse
from songvote.schemas.item import ItemCreateRequest, ItemResponse
from songvote.schemas.rating import RatingCounts, UserVoteStatus, VoteRequest

__all__ = [
    # Common
    "ErrorResponse",
    # Health
    "HealthCheckResponse",
    # Item
    "ItemCreateRequest",
    "ItemResponse",
    # Rating
    "RatingCounts",
    "UserVoteStatus",
    "VoteRequest",
]
