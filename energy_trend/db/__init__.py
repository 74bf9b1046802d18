"""
Database package for the SQLAlchemy model and storage handle.

CHANGELOG:
- 2026-10-05: Initial creation (STORY-002)

TODO:
- None
"""

from energy_trend.db.models import Base, EnergyReading
from energy_trend.db.store import ReadingStore, StorageError, create_engine

__all__ = [
    "Base",
    "EnergyReading",
    "ReadingStore",
    "StorageError",
    "create_engine",
]
