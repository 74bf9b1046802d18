"""
Readings API endpoints: list stored readings and analyse the trend.

Provides GET /api/data, GET /api/analyze and POST /api/analyze. Storage
failures are logged and answered with a generic 500 carrying a static
message; no internal detail is returned to the caller.

CHANGELOG:
- 2026-10-05: Initial creation (STORY-003)
- 2026-10-08: Map StorageError to a static 500 body (STORY-005)

TODO:
- None
"""

import datetime
import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from energy_trend.api.deps import Store
from energy_trend.db.store import ReadingStore, StorageError
from energy_trend.services.trend import summarize

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["readings"])

RETRIEVE_ERROR = "An error occurred while retrieving the data"
PROCESS_ERROR = "An error occurred while processing the data"


# ---------------------------------------------------------------------------
# Pydantic request / response schemas
# ---------------------------------------------------------------------------


class ReadingCreate(BaseModel):
    """Schema for one reading submitted for insertion.

    Attributes:
        date: Calendar day, ``YYYY-MM-DD``.
        consumption: Consumption for the day.

    Both fields are optional here: a missing value reaches the NOT NULL
    column, fails the insert and rolls the whole batch back.
    """

    date: datetime.date | None = None
    consumption: float | None = None


class ReadingOut(BaseModel):
    """Schema for a stored reading."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    date: datetime.date
    consumption: float


class AnalyzeRequest(BaseModel):
    """Schema for the POST /api/analyze body.

    Attributes:
        data: Readings to insert before analysing. May be empty or null.
    """

    data: list[ReadingCreate] | None = None


class AnalysisResponse(BaseModel):
    """Schema for the trend analysis over the full table.

    Attributes:
        trend: Trend label.
        data_points: Number of stored readings (``dataPoints`` on the wire).
        latest_data: Most recent readings in date order (``latestData``).
    """

    model_config = ConfigDict(populate_by_name=True)

    trend: str
    data_points: int = Field(alias="dataPoints")
    latest_data: list[ReadingOut] = Field(alias="latestData")


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": message})


async def _analyze(store: ReadingStore) -> AnalysisResponse:
    """Load every reading and summarise the trend."""
    readings = await store.list_readings()
    return AnalysisResponse.model_validate(summarize(readings), from_attributes=True)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@router.get("/data", response_model=list[ReadingOut])
async def get_data(store: Store):
    """Return all readings ordered by date ascending.

    Args:
        store: Storage handle.

    Returns:
        list[ReadingOut]: Every stored reading, or a 500 JSONResponse on
            storage failure.
    """
    try:
        readings = await store.list_readings()
    except StorageError:
        logger.exception("Error retrieving data")
        return _error(RETRIEVE_ERROR)
    return [ReadingOut.model_validate(r) for r in readings]


@router.get("/analyze", response_model=AnalysisResponse)
async def get_analysis(store: Store):
    """Return the trend, row count and latest readings for the full table."""
    try:
        return await _analyze(store)
    except StorageError:
        logger.exception("Error processing data")
        return _error(PROCESS_ERROR)


@router.post("/analyze", response_model=AnalysisResponse)
async def post_analysis(store: Store, payload: AnalyzeRequest | None = None):
    """Insert a batch of readings, then analyse the full table.

    The batch is written in one transaction. An empty or absent ``data``
    list inserts nothing; the analysis is returned either way.

    Args:
        store: Storage handle.
        payload: Optional body with the readings to insert.

    Returns:
        AnalysisResponse: Analysis recomputed over every stored reading,
            or a 500 JSONResponse on storage failure.
    """
    items = payload.data if payload is not None and payload.data else []
    try:
        if items:
            await store.insert_readings([item.model_dump() for item in items])
        return await _analyze(store)
    except StorageError:
        logger.exception("Error processing data")
        return _error(PROCESS_ERROR)
