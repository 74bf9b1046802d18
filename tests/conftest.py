"""
Shared test fixtures for the Energy Trend API tests.

Provides an in-memory FakeStore standing in for ReadingStore and a
TestClient wired to it through dependency overrides.

CHANGELOG:
- 2026-10-05: Initial creation (STORY-003)

TODO:
- None
"""

import datetime

import pytest
from energy_trend.api.deps import get_store
from energy_trend.db.models import EnergyReading
from energy_trend.db.store import StorageError
from energy_trend.main import app
from fastapi.testclient import TestClient


class FakeStore:
    """In-memory ReadingStore replacement with the same ordering rules.

    Set ``fail`` to make every operation raise StorageError.
    """

    def __init__(self) -> None:
        self.rows: list[EnergyReading] = []
        self.fail = False
        self._next_id = 1

    def _check(self) -> None:
        if self.fail:
            raise StorageError("simulated failure")

    async def ping(self) -> None:
        self._check()

    async def list_readings(self) -> list[EnergyReading]:
        self._check()
        return sorted(self.rows, key=lambda r: (r.date, r.id))

    async def insert_readings(self, items) -> int:
        self._check()
        staged = []
        for item in items:
            if item.get("date") is None or item.get("consumption") is None:
                raise StorageError("NOT NULL constraint failed")
            staged.append(
                EnergyReading(
                    id=self._next_id + len(staged),
                    date=item["date"],
                    consumption=item["consumption"],
                )
            )
        self.rows.extend(staged)
        self._next_id += len(staged)
        return len(staged)

    def seed(self, *pairs: tuple[str, float]) -> None:
        """Insert (iso date, consumption) pairs synchronously."""
        for day, consumption in pairs:
            self.rows.append(
                EnergyReading(
                    id=self._next_id,
                    date=datetime.date.fromisoformat(day),
                    consumption=consumption,
                )
            )
            self._next_id += 1


@pytest.fixture()
def fake_store() -> FakeStore:
    """Create an empty FakeStore.

    Returns:
        FakeStore: In-memory store.
    """
    return FakeStore()


@pytest.fixture()
def client(fake_store: FakeStore) -> TestClient:
    """Create a TestClient whose routes use *fake_store*.

    The lifespan is not entered, so no database connection is attempted.

    Args:
        fake_store: In-memory store injected via dependency override.

    Returns:
        TestClient: Configured test client for the FastAPI app.
    """
    app.dependency_overrides[get_store] = lambda: fake_store

    yield TestClient(app)

    app.dependency_overrides.clear()
