"""Logging configuration for umbralux."""

import logging
from pathlib import Path
from typing import Optional

from umbralux.config import LOG_SETTINGS


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    name: str = "umbralux",
) -> logging.Logger:
    """
    Set up logging for the package logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path of a file that receives the same records
        name: Logger name

    Returns:
        Configured logger instance
    """
    if level is None:
        level = LOG_SETTINGS['level']
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(LOG_SETTINGS['format'])

    # Drop handlers from an earlier call so records are not duplicated
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
