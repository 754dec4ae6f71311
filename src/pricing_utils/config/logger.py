"""
Logger setup for the pricing utilities.

Library modules only call ``logging.getLogger(__name__)``; entry points
(the Streamlit page, scripts) call ``setup_logger`` once.
"""
import logging
import sys
from typing import Optional

from .settings import get_settings


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logger(name: str = "pricing_utils", level: Optional[str] = None) -> logging.Logger:
    """Configure and return the package logger (idempotent)."""
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    level_name = (level or get_settings().log_level).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    # Keep records out of the root logger (Streamlit installs its own handlers)
    logger.propagate = False
    return logger
