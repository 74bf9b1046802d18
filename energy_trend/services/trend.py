"""
Trend analysis over daily energy readings.

The trend label is derived only from the earliest and latest readings by
date; intermediate points do not influence it.

CHANGELOG:
- 2026-10-05: Initial creation (STORY-003)
- 2026-10-06: Sort without mutating the caller's sequence (STORY-003)

TODO:
- None
"""

import datetime
import enum
from collections.abc import Sequence
from typing import Any, Protocol

# Number of most recent readings returned alongside the trend.
LATEST_COUNT = 5


class ReadingLike(Protocol):
    """Anything with a ``date`` and a ``consumption`` attribute."""

    date: datetime.date
    consumption: float


class TrendLabel(str, enum.Enum):
    """Coarse direction of consumption between the first and last day."""

    NOT_ENOUGH_DATA = "Not enough data"
    INCREASING = "Increasing"
    DECREASING = "Decreasing"
    STABLE = "Stable"


def sort_by_date(readings: Sequence[ReadingLike]) -> list[ReadingLike]:
    """Return a new list of *readings* in ascending date order.

    The sort is stable, so readings sharing a date keep their relative order.
    """
    return sorted(readings, key=lambda r: r.date)


def analyze_trend(readings: Sequence[ReadingLike]) -> TrendLabel:
    """Compare the earliest and latest reading by date.

    Args:
        readings: Readings in any order. The sequence is not modified.

    Returns:
        TrendLabel: NOT_ENOUGH_DATA for fewer than two readings, otherwise
            INCREASING, DECREASING or STABLE depending on whether the latest
            consumption is above, below or equal to the earliest.
    """
    if len(readings) < 2:
        return TrendLabel.NOT_ENOUGH_DATA

    ordered = sort_by_date(readings)
    first = ordered[0].consumption
    last = ordered[-1].consumption

    if last > first:
        return TrendLabel.INCREASING
    if last < first:
        return TrendLabel.DECREASING
    return TrendLabel.STABLE


def summarize(
    readings: Sequence[ReadingLike], latest: int = LATEST_COUNT,
) -> dict[str, Any]:
    """Build the analysis payload for a set of readings.

    Args:
        readings: All readings to analyse.
        latest: How many of the most recent readings to include.

    Returns:
        dict: ``trend`` label value, ``dataPoints`` count and ``latestData``,
            the last *latest* readings in ascending date order.
    """
    ordered = sort_by_date(readings)
    return {
        "trend": analyze_trend(ordered).value,
        "dataPoints": len(ordered),
        "latestData": ordered[-latest:] if latest > 0 else [],
    }
