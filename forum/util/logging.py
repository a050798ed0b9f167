"""Stdlib logging setup.

Application code reports through Logfire. This module shapes the plain
``logging`` records from uvicorn, SQLAlchemy, asyncpg and alembic (and the
launch scripts) so they share stdout with it.
"""

import logging
import sys

from forum.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

ENVIRONMENT_LEVELS: dict[str, int] = {
    "test": logging.WARNING,
    "development": logging.INFO,
    "staging": logging.INFO,
    "production": logging.INFO,
}

# Libraries that are chatty at INFO; raised to INFO only in debug mode
QUIET_LIBRARIES: dict[str, int] = {
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
    "asyncpg": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}


def resolve_level(settings: Settings) -> int:
    """Root log level for the configured environment."""
    if settings.debug:
        return logging.DEBUG
    return ENVIRONMENT_LEVELS.get(settings.environment, logging.INFO)


def setup_logging(settings: Settings) -> None:
    """Send every stdlib record to stdout in one format.

    Replaces any handlers already on the root logger, so calling it twice
    does not duplicate output.
    """
    level = resolve_level(settings)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)

    for name, quiet_level in QUIET_LIBRARIES.items():
        library_level = logging.INFO if settings.debug else quiet_level
        logging.getLogger(name).setLevel(library_level)

    get_logger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, usually ``get_logger(__name__)``."""
    return logging.getLogger(name)
