"""SongVote Backend -- FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.ext.asyncio import AsyncEngine

from songvote import __version__
from songvote.api.router import api_router
from songvote.config import Settings, settings as default_settings
from songvote.core.exceptions import (
    DuplicateVoteError,
    InvalidRequestError,
    NotFoundError,
    StorageError,
)
from songvote.db.session import build_engine, build_session_factory, create_tables
from songvote.schemas.common import ErrorResponse
from songvote.services.rating_store import RatingStore

# Configure logging
logging.basicConfig(
    level=logging.INFO if default_settings.DEBUG else logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain exceptions onto HTTP status codes with an {"error": ...} body."""

    @app.exception_handler(InvalidRequestError)
    async def invalid_request_handler(request: Request, exc: InvalidRequestError):
        return _error(400, exc.message)

    @app.exception_handler(DuplicateVoteError)
    async def duplicate_vote_handler(request: Request, exc: DuplicateVoteError):
        return _error(400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        detail = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return _error(400, f"Invalid request: {detail}")

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return _error(404, exc.message)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error(f"Storage error on {request.method} {request.url.path}: {exc.message}")
        return _error(500, exc.message)


def create_app(
    settings: Optional[Settings] = None,
    engine: Optional[AsyncEngine] = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Settings to use (defaults to the environment-loaded ones)
        engine: Pre-built async engine; built from settings.DATABASE_URL if omitted
    """
    settings = settings or default_settings
    engine = engine or build_engine(settings.DATABASE_URL)
    session_factory = build_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan: startup and shutdown events."""
        logger.info("Starting SongVote API server...")
        logger.info(f"Environment: {settings.ENVIRONMENT}")
        logger.info(f"Debug mode: {settings.DEBUG}")

        await create_tables(engine)
        logger.info("Database tables verified/created")

        yield

        logger.info("Shutting down SongVote API server...")
        await engine.dispose()

    app = FastAPI(
        title="SongVote API",
        description="Thumbs up/down ratings for songs on the radio stream",
        version=__version__,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.session_factory = session_factory
    app.state.rating_store = RatingStore(session_factory)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    static_dir = Path(settings.STATIC_DIR)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        @app.get("/")
        async def root():
            """Root endpoint with API information."""
            return {
                "name": "SongVote API",
                "version": __version__,
                "docs": "/docs" if settings.DEBUG else None,
                "health": "/api/health",
            }

    return app


app = create_app()
