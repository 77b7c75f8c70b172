# forgemath/logger.py
import logging
from typing import Optional

from .config import LOG_LEVEL, LOG_FORMAT


def get_logger(name: str = "forgemath", level: Optional[str] = None) -> logging.Logger:
    """Return a logger with a single console handler attached on first use."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(ch)
    level = level or LOG_LEVEL
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return logger

__all__ = ["get_logger"]
