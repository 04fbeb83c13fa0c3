"""Logger setup for the electrics package."""

import logging
from typing import Optional

from electrics.config import get_settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling this again only changes the level; the handler is added once.

    Args:
        level: Level name; falls back to ELECTRICS_LOG_LEVEL.

    Returns:
        The configured 'electrics' logger.
    """
    global _handler

    logger = logging.getLogger("electrics")
    logger.setLevel((level or get_settings().log_level).upper())

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(_FORMAT))
    if _handler not in logger.handlers:
        logger.addHandler(_handler)

    return logger
