"""Stdlib logging setup for the API process."""

import logging
import sys

from memora.config import Settings

# Libraries that log every request or query at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "asyncpg", "multipart")


def _level_for(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Send stdlib logs (uvicorn, alembic, libraries) to stdout.

    Application events go through logfire; this only covers what
    third-party code writes with ``logging``.

    Args:
        settings: Application settings
    """
    level = _level_for(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("memora").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
