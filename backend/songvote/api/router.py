"""API router -- aggregates all endpoint routers."""

from fastapi import APIRouter

from songvote.api import health, items, ratings

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(ratings.router, prefix="/ratings", tags=["ratings"])
api_router.include_router(items.router, prefix="/items", tags=["items"])
