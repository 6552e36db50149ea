"""
Logging configuration for the application.

``setup_logging`` configures the root logger with a console handler
and, optionally, a file handler.  Request lines are written by the
application's own middleware (method, path, status and duration), so
uvicorn's access logger is quietened to avoid logging every request
twice.  Handlers are attached at most once per process so repeated
``create_app`` calls (as in the test suite) do not stack them.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers whose output duplicates the request-logging middleware.
QUIETED_LOGGERS = ("uvicorn.access",)


def quiet_duplicate_loggers(level: int = logging.WARNING) -> None:
    for name in QUIETED_LOGGERS:
        logging.getLogger(name).setLevel(level)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.  Relative paths are resolved against the
        current working directory.
    """
    quiet_duplicate_loggers()

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
