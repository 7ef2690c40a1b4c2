"""Logging setup shared by the application entry points."""

import logging

from noisy_students.core.settings import Settings

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(settings: Settings) -> None:
    """Configure the root logger from settings.

    Debug mode forces DEBUG regardless of ``log_level``. Calling this more
    than once only adjusts the level; handlers are installed a single time.
    """
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format=_LOG_FORMAT, datefmt=_DATE_FORMAT)
    logging.getLogger().setLevel(level)
