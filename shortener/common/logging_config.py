"""Logging configuration for URL shortener."""

import logging
import sys
from typing import Callable, Optional

from .timeutils import to_iso_z, utcnow


LOGGER_NAME = "url_shortener"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> logging.Logger:
    """Setup logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
        json_format: Whether to use JSON format

    Returns:
        Configured logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    # Remove existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if json_format:
        formatter = logging.Formatter(
            '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
            '"logger": "%(name)s", "message": "%(message)s"}'
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_event_logger(logger: Optional[logging.Logger] = None) -> Callable[[str], None]:
    """Return a ``log(message)`` hook for user-facing events.

    Messages come out as ``[LOG] [2024-01-01T12:00:00.000Z]: message``.
    """
    logger = logger or logging.getLogger(f"{LOGGER_NAME}.events")

    def log(message: str) -> None:
        logger.info(f"[LOG] [{to_iso_z(utcnow())}]: {message}")

    return log
