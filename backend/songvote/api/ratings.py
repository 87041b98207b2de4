"""Song rating API endpoints.

Song keys are base64 and may contain "/", so the key segments use the
path converter. The user-vote route is registered first so that
".../user/{user_id}" is not swallowed by the aggregate route.

A key that itself contains "/user/" is routed to the user-vote endpoint on
GET. Starlette decodes "%2F" before routing, so clients cannot escape it.
"""

from fastapi import APIRouter, Depends

from songvote.core.exceptions import InvalidRequestError
from songvote.dependencies import get_rating_store
from songvote.schemas.common import ErrorResponse
from songvote.schemas.rating import RatingCounts, UserVoteStatus, VoteRequest
from songvote.services.rating_store import RATING_TYPES, RatingStore

router = APIRouter()


@router.get("/{song_key:path}/user/{user_id}", response_model=UserVoteStatus)
async def get_user_vote(
    song_key: str,
    user_id: str,
    store: RatingStore = Depends(get_rating_store),
):
    """Check whether a user has voted on a song."""
    rating_type = await store.get_user_vote(song_key, user_id)
    return UserVoteStatus(has_rated=rating_type is not None, rating_type=rating_type)


@router.get("/{song_key:path}", response_model=RatingCounts)
async def get_ratings(song_key: str, store: RatingStore = Depends(get_rating_store)):
    """Get thumbs up/down totals for a song (zeros if unrated)."""
    return RatingCounts(**await store.get_aggregate(song_key))


@router.post(
    "",
    response_model=RatingCounts,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def submit_rating(body: VoteRequest, store: RatingStore = Depends(get_rating_store)):
    """Cast a thumbs up/down vote. Each user may vote once per song."""
    missing = body.missing_fields()
    if missing:
        raise InvalidRequestError(f"Missing required fields: {', '.join(missing)}")

    if body.rating_type not in RATING_TYPES:
        raise InvalidRequestError("Invalid rating type")

    counts = await store.cast_vote(
        song_key=body.song_key,
        artist=body.artist,
        title=body.title,
        rating_type=body.rating_type,
        user_id=body.user_id,
    )
    return RatingCounts(**counts)
