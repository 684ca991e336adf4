"""Stdout logging for the resume API; level comes from ``settings.log_level``."""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def get_logger(name: str, level: Optional[int | str] = None) -> logging.Logger:
    """Logger for an API module. The handler is attached only on first use."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        # request lines go to our handler only, not to uvicorn's root logger too
        logger.propagate = False
    if level is not None:
        logger.setLevel(level)
    return logger
