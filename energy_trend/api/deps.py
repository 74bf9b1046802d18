"""
FastAPI dependency injection providers.

Exposes the process-wide ReadingStore created in the application lifespan
to route handlers via Depends().

CHANGELOG:
- 2026-10-05: Initial creation (STORY-002)

TODO:
- None
"""

from typing import Annotated

from fastapi import Depends, Request

from energy_trend.db.store import ReadingStore


def get_store(request: Request) -> ReadingStore:
    """Return the ReadingStore attached to the running application.

    Args:
        request: Incoming request, used to reach ``app.state``.

    Returns:
        ReadingStore: Storage handle opened at startup.
    """
    return request.app.state.store


# Annotated dependency for use in FastAPI route signatures:
#   async def my_endpoint(store: Store): ...
Store = Annotated[ReadingStore, Depends(get_store)]
