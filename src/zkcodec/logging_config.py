"""Logging setup for the zkcodec package."""

import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Args:
        level: Logging level; defaults to the configured ``log_level``

    Returns:
        logging.Logger: The ``zkcodec`` logger
    """
    if level is None:
        from zkcodec.config import get_settings
        level = get_settings().log_level
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger("zkcodec")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
