"""Rating Pydantic schemas for request/response validation."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class VoteRequest(BaseModel):
    """Request to cast a vote on a song.

    Fields are optional at the schema level so that missing values are
    reported together by ``missing_fields`` instead of as a 422.
    """
    model_config = ConfigDict(populate_by_name=True)

    song_key: Optional[str] = Field(None, alias="songKey")
    artist: Optional[str] = None
    title: Optional[str] = None
    rating_type: Optional[str] = Field(None, alias="ratingType")
    user_id: Optional[str] = Field(None, alias="userId")

    def missing_fields(self) -> List[str]:
        """Return the wire names of fields that are absent or empty."""
        return [
            field.alias or name
            for name, field in type(self).model_fields.items()
            if not getattr(self, name)
        ]


class RatingCounts(BaseModel):
    """Aggregate vote totals for a song."""
    thumbs_up: int = 0
    thumbs_down: int = 0


class UserVoteStatus(BaseModel):
    """Whether a user has voted on a song, and which way."""
    model_config = ConfigDict(populate_by_name=True)

    has_rated: bool = Field(alias="hasRated")
    rating_type: Optional[str] = Field(None, alias="ratingType")
