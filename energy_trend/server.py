"""
Server runner: bind the listening socket and serve the app with uvicorn.

If the configured port is already in use, the next port is tried exactly
once. Any other bind failure, or a failed application startup (for example
an unreachable database), ends the process with a non-zero exit status.

CHANGELOG:
- 2026-10-06: Initial creation (STORY-004)
- 2026-10-09: Use structured JSON logging (STORY-006)

TODO:
- None
"""

import errno
import logging
import socket
import sys

import uvicorn

from energy_trend.config import get_settings
from energy_trend.logging_config import setup_logging

logger = logging.getLogger(__name__)

# Matches uvicorn's own exit status for a failed startup.
STARTUP_FAILURE = 3


def _bind(host: str, port: int) -> socket.socket:
    """Create a TCP socket bound to (*host*, *port*)."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    return sock


def bind_socket(host: str, port: int) -> tuple[socket.socket, int]:
    """Bind *port*, falling back to ``port + 1`` once if it is in use.

    Args:
        host: Listen address.
        port: Preferred listen port.

    Returns:
        tuple: The bound socket and the port actually used.

    Raises:
        OSError: If binding fails for a reason other than the port being in
            use, or if the fallback port is in use as well.
    """
    try:
        return _bind(host, port), port
    except OSError as exc:
        if exc.errno != errno.EADDRINUSE:
            raise
        logger.warning("Port %d is already in use. Trying port %d", port, port + 1)
    return _bind(host, port + 1), port + 1


def main() -> None:
    """Energy Trend API entry point.

    Loads settings, configures logging, binds the socket and runs uvicorn
    until interrupted.
    """
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    try:
        sock, port = bind_socket(settings.HOST, settings.PORT)
    except OSError:
        logger.exception("Error starting server")
        sys.exit(1)

    config = uvicorn.Config(
        "energy_trend.main:app",
        lifespan="on",
        log_config=None,
        log_level=settings.LOG_LEVEL.lower(),
    )
    server = uvicorn.Server(config)
    logger.info("Starting server on port %d", port)
    server.run(sockets=[sock])

    if not server.started:
        logger.error("Server startup aborted")
        sys.exit(STARTUP_FAILURE)


if __name__ == "__main__":
    main()
