"""
Process-wide logging setup for the API server.

Records from the application and from uvicorn (which runs with
``log_config=None``) share one stderr handler that writes a JSON object
per line, so container log collectors can parse them without a pattern.

CHANGELOG:
- 2026-10-09: Initial creation (STORY-006)
- 2026-10-21: Render tracebacks into the record, accept level names (STORY-008)

TODO:
- None
"""

import json
import logging
from datetime import UTC, datetime


class JSONFormatter(logging.Formatter):
    """Render a record as ``{"timestamp", "level", "logger", "message"}``.

    ``exc_info`` is added only for records logged with a traceback, e.g.
    through ``logger.exception`` in the request handlers.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(level: int | str = logging.INFO) -> None:
    """Route every logger through a single JSON stderr handler.

    Args:
        level: Root level, numeric or a name in any case (``"debug"``).
    """
    if isinstance(level, str):
        level = level.upper()

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)
