"""Logging configuration helpers."""

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

# e.g. CARVE_LOG_LEVEL=info to see store loads and write failures
LEVEL_ENV = "CARVE_LOG_LEVEL"


def configure_logging(level: int | str | None = None) -> None:
    """Send ``carve_log`` records to stderr through one stream handler.

    The level comes from ``level``, then ``$CARVE_LOG_LEVEL``, then WARNING.
    """
    logger = logging.getLogger("carve_log")
    if level is None:
        level = os.environ.get(LEVEL_ENV, "WARNING")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
