"""Process-wide logging setup shared by the services."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(threadName)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# Loggers uvicorn creates on its own; kept at the service level so request
# and lifecycle lines are not dropped or duplicated.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO", stream=None) -> logging.Handler | None:
    """Send service logs to ``stream`` (stdout by default).

    Returns the installed handler, or None when the root logger was already
    configured by someone else (pytest, an embedding process).
    """
    level = level.upper()
    for name in SERVER_LOGGERS:
        logging.getLogger(name).setLevel(level)

    root = logging.getLogger()
    if root.handlers:
        return None

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root.setLevel(level)
    root.addHandler(handler)
    return handler
