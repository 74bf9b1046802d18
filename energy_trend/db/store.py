"""
Async storage handle for energy readings.

Wraps a SQLAlchemy 2.x async engine (aiomysql driver for MySQL) and its
connection pool. A single ReadingStore is created at application startup,
kept on ``app.state`` and injected into route handlers; it is disposed at
shutdown.

CHANGELOG:
- 2026-10-05: Initial creation (STORY-002)
- 2026-10-07: Build engine from Settings with bounded pool (STORY-004)
- 2026-10-08: Wrap SQLAlchemy failures in StorageError (STORY-005)

TODO:
- None
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy import select, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from energy_trend.config import Settings
from energy_trend.db.models import Base, EnergyReading

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when a storage operation fails for any database reason."""


def create_engine(settings: Settings) -> AsyncEngine:
    """Create an async SQLAlchemy engine from configuration.

    Args:
        settings: Application settings providing the URL and pool size.

    Returns:
        AsyncEngine: Configured async engine. Server databases get a pool
            bounded by DB_POOL_SIZE; SQLite keeps the dialect's own pool.

    Raises:
        StorageError: If the URL is invalid or names an unknown driver.
    """
    try:
        url = make_url(settings.database_url)
        options = {"pool_pre_ping": True, "echo": False}
        if url.get_backend_name() != "sqlite":
            options["pool_size"] = settings.DB_POOL_SIZE
        return create_async_engine(url, **options)
    except (SQLAlchemyError, ImportError) as exc:
        raise StorageError("Invalid database configuration") from exc


class ReadingStore:
    """Storage access for the energy_data table.

    Each operation checks out one connection for its duration and returns
    it to the pool when done, including on error.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._session_factory = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "ReadingStore":
        """Build a store backed by a new engine for *settings*."""
        return cls(create_engine(settings))

    async def ping(self) -> None:
        """Probe the database with ``SELECT 1``.

        Raises:
            StorageError: If the database cannot be reached.
        """
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            raise StorageError("Database is unreachable") from exc

    async def create_schema(self) -> None:
        """Create the energy_data table if it does not exist.

        Raises:
            StorageError: If the DDL fails.
        """
        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as exc:
            raise StorageError("Failed to initialize schema") from exc

    async def list_readings(self) -> list[EnergyReading]:
        """Return every reading ordered by date, ties in insertion order.

        Raises:
            StorageError: If the query fails.
        """
        stmt = select(EnergyReading).order_by(
            EnergyReading.date, EnergyReading.id,
        )
        try:
            async with self._session_factory() as session:
                result = await session.scalars(stmt)
                return list(result.all())
        except SQLAlchemyError as exc:
            raise StorageError("Failed to list readings") from exc

    async def insert_readings(self, items: Iterable[Mapping[str, Any]]) -> int:
        """Insert a batch of readings in a single transaction.

        Either every row is committed or none is: a failure on any row
        rolls back the whole batch.

        Args:
            items: Mappings with ``date`` and ``consumption`` keys.

        Returns:
            int: Number of rows inserted (0 for an empty batch).

        Raises:
            StorageError: If any insert or the commit fails.
        """
        rows = [
            EnergyReading(date=item["date"], consumption=item["consumption"])
            for item in items
        ]
        if not rows:
            return 0

        try:
            async with self._session_factory() as session:
                async with session.begin():
                    session.add_all(rows)
        except SQLAlchemyError as exc:
            raise StorageError("Failed to insert readings") from exc

        logger.info("Inserted %d new data points", len(rows))
        return len(rows)

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self._engine.dispose()
