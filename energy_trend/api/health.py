"""
Health check endpoint that probes database connectivity.

Returns HTTP 200 when the database answers, or HTTP 503 when it does not.

CHANGELOG:
- 2026-10-09: Initial creation (STORY-007)

TODO:
- None
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from energy_trend.api.deps import Store
from energy_trend.db.store import StorageError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(store: Store) -> JSONResponse:
    """Probe the database with a ``SELECT 1``.

    Returns:
        JSONResponse: JSON with status and db fields.
            HTTP 200 when the database is reachable, HTTP 503 otherwise.
    """
    try:
        await store.ping()
        db_status = "ok"
    except StorageError:
        logger.warning("Health check: DB probe failed", exc_info=True)
        db_status = "error"

    all_ok = db_status == "ok"
    return JSONResponse(
        status_code=200 if all_ok else 503,
        content={"status": "ok" if all_ok else "degraded", "db": db_status},
    )
