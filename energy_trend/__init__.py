"""
Energy Trend API: daily energy-consumption readings and trend analysis.

CHANGELOG:
- 2026-10-05: Initial creation (STORY-001)

TODO:
- None
"""

__version__ = "0.1.0"
