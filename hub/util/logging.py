"""Standard library logging setup for scripts and uvicorn."""

import logging
import sys

from hub.config import Settings

# Libraries that are chatty at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "asyncpg", "alembic.runtime.migration")


def setup_logging(settings: Settings) -> None:
    """Send log records to stdout at INFO, or DEBUG when ``settings.debug``.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
