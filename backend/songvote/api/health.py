"""Health check endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from songvote.dependencies import get_db
from songvote.schemas import HealthCheckResponse

router = APIRouter()


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(db: AsyncSession = Depends(get_db)):
    """Return service health status.

    Returns "ok" when the database answers a trivial query, otherwise
    "degraded" with the error text.
    """
    try:
        result = await db.execute(text("SELECT 1"))
        result.scalar()
        db_status = "ok"
    except Exception as e:
        db_status = f"error: {str(e)}"

    overall_status = "ok" if db_status == "ok" else "degraded"
    return HealthCheckResponse(status=overall_status, database=db_status)
