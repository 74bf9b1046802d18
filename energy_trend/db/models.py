"""
SQLAlchemy ORM models for the energy readings database.

Defines the EnergyReading model for the energy_data table. The table
carries no uniqueness constraint on date: several readings may share a day.

CHANGELOG:
- 2026-10-05: Initial creation (STORY-002)

TODO:
- None
"""

import datetime

from sqlalchemy import Date, Float, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """SQLAlchemy declarative base for all ORM models."""

    pass


class EnergyReading(Base):
    """One daily energy-consumption reading.

    Attributes:
        id: Auto-incrementing identifier, monotonic by insertion.
        date: Calendar day of the reading.
        consumption: Consumption for the day (unvalidated, usually >= 0).
    """

    __tablename__ = "energy_data"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    consumption: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self) -> str:
        """Return string representation of the EnergyReading."""
        return (
            f"EnergyReading(id={self.id!r}, date={self.date!r}, "
            f"consumption={self.consumption!r})"
        )
