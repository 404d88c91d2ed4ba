"""
Logging configuration for the address book.

``LOG_LEVEL`` is read once in ``Settings`` and shared by two consumers:
the root logger configured here and the uvicorn server started by
``run.py``.  Uvicorn only understands its own lowercase level names, so
``resolve_log_level`` maps the configured value onto one of them
(``WARN`` becomes ``warning``, ``FATAL`` becomes ``critical``) and falls
back to ``info`` for names neither side knows.  Both consumers use that
resolved name, so they always agree.
"""

import logging
from pathlib import Path
from typing import Dict

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Uvicorn's accepted level names and their numeric values; ``trace`` is
# uvicorn's own level below DEBUG.
UVICORN_LEVELS: Dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": 5,
}

_ALIASES = {"warn": "warning", "fatal": "critical"}

DEFAULT_LEVEL = "info"


def resolve_log_level(name: str) -> str:
    """Map a configured level name onto one uvicorn accepts."""
    key = (name or "").strip().lower()
    key = _ALIASES.get(key, key)
    if key not in UVICORN_LEVELS:
        logging.getLogger(__name__).warning(
            "Unknown LOG_LEVEL %r, using %r", name, DEFAULT_LEVEL
        )
        return DEFAULT_LEVEL
    return key


def setup_logging(settings: Settings) -> str:
    """Configure the root logger from ``settings`` and return the level used.

    A console handler is always attached, plus a file handler when
    ``settings.log_file`` is set.  If the root logger already has
    handlers (``create_app`` runs once per test) they are left alone
    and only the resolved level name is returned.
    """
    level = resolve_log_level(settings.log_level)
    logger = logging.getLogger()
    if logger.handlers:
        return level

    logger.setLevel(UVICORN_LEVELS[level])
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return level
