"""FastAPI application factory.

API layer:
- Validates inputs, reads/writes DB through the ingest and aggregation layers
- Returns payloads for the survey frontend
- Forbidden: aggregation logic, direct SQL
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Generator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from tally.config import load_settings
from tally.db.repo import DbSession
from tally.db.session import get_session, init_db

logger = logging.getLogger(__name__)


def get_db_session(request: Request) -> Generator[DbSession, None, None]:
    """Dependency to get database session.

    Yields:
        Database session that is automatically closed after request.
    """
    session = get_session(request.app.state.db_path)
    try:
        yield session
    finally:
        session.close()


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        db_path: Optional path to database file. Defaults to TALLY_DB_PATH.

    Returns:
        Configured FastAPI application.
    """
    settings = load_settings()
    if db_path is None:
        db_path = settings.db_path

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        init_db(app.state.db_path)
        yield

    app = FastAPI(
        title="Tally API",
        description="Survey submissions and dominant answer per question",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.db_path = db_path

    # Add CORS middleware for the survey frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Include routes
    from tally.api.routes import submissions, summary

    app.include_router(submissions.router, prefix="/api")
    app.include_router(summary.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    logger.debug("Created app with database %s", db_path)
    return app


# Default app instance
app = create_app()
