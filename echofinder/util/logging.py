"""Logging configuration for the application.

Application code logs through logfire. This only sets up the stdlib root
logger that third-party libraries (uvicorn, sqlalchemy, alembic) write to.
"""

import logging
import sys

import logfire

from echofinder.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging and forward it to Logfire.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout), logfire.LogfireLoggingHandler()],
        force=True,
    )

    # Set noisy third-party loggers to WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logging.getLogger("echofinder").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
