"""
Logging setup for the News API service.

Call :func:`configure_logging` once at process startup (``news_api.main``
does this on import).  Every other module just does::

    logger = logging.getLogger(__name__)

and inherits the handler and level configured here.
"""
from __future__ import annotations

import logging

from news_api.config import settings

SERVICE_LOGGER_NAME = "news_api"

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_configured = False


def _parse_level(value: str | None) -> int:
    """Map a level name such as ``"debug"`` to its logging constant (default INFO)."""
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str | None = None, *, force: bool = False) -> logging.Logger:
    """
    Initialise root logging and return the service logger.

    Repeated calls are no-ops unless *force* is True, so importing the
    application twice (e.g. under a reloader) does not stack handlers.
    """
    global _configured

    resolved = _parse_level(level or settings.LOG_LEVEL)
    if not _configured or force:
        logging.basicConfig(level=resolved, format=_LOG_FORMAT, force=force)
        # SQL echo is controlled separately via settings.SQL_ECHO.
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
        _configured = True

    logger = logging.getLogger(SERVICE_LOGGER_NAME)
    logger.setLevel(resolved)
    return logger
