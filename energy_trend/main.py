"""
FastAPI application entry point for the Energy Trend API.

Builds the application, registers routers and CORS, and owns the
ReadingStore lifecycle: opened and checked at startup, disposed at shutdown.

CHANGELOG:
- 2026-10-05: Initial creation (STORY-001)
- 2026-10-05: Register readings router (STORY-003)
- 2026-10-08: Abort startup when the database is unreachable (STORY-005)
- 2026-10-09: Register health router and CORS middleware (STORY-006, STORY-007)

TODO:
- None
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from energy_trend import __version__
from energy_trend.api.health import router as health_router
from energy_trend.api.readings import router as readings_router
from energy_trend.config import get_settings
from energy_trend.db.store import ReadingStore, StorageError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: open the store, verify it, create the table.

    Raises:
        StorageError: If the database configuration is invalid, the database
            is unreachable or the schema cannot be created. The server
            aborts startup.
    """
    try:
        store = ReadingStore.from_settings(get_settings())
    except StorageError:
        logger.exception("Server startup aborted due to database failure")
        raise

    try:
        await store.ping()
        logger.info("Successfully connected to the database")
        await store.create_schema()
        logger.info("Database initialized successfully")
    except StorageError:
        logger.exception("Server startup aborted due to database failure")
        await store.dispose()
        raise

    app.state.store = store
    try:
        yield
    finally:
        await store.dispose()
        logger.info("Database connections closed")


def create_app() -> FastAPI:
    """Create the FastAPI application.

    Returns:
        FastAPI: Application with routers and CORS configured.
    """
    settings = get_settings()
    application = FastAPI(
        title="Energy Trend API",
        description="Daily energy-consumption readings and trend analysis.",
        version=__version__,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(readings_router)
    application.include_router(health_router)

    @application.get("/")
    async def root() -> dict:
        """Liveness endpoint.

        Returns:
            dict: JSON object with application status.
        """
        return {"status": "ok"}

    return application


app = create_app()
