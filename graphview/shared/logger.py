"""
Centralized logging configuration for graphview.
"""

import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Optional

from .settings import get_settings


@lru_cache()
def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    include_timestamp: bool = True
) -> None:
    """
    Setup centralized logging configuration.

    Args:
        log_level: Logging level, defaults to the configured level
        log_file: Optional log file path, defaults to the configured file
        include_timestamp: Whether to include timestamps
    """
    config = get_settings().logging_config

    level_str = (log_level or config['level']).upper()
    level = getattr(logging, level_str, logging.INFO)
    log_file = log_file or config['file']

    if include_timestamp:
        formatter = logging.Formatter(config['format'], datefmt='%Y-%m-%d %H:%M:%S')
    else:
        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')

    logger = logging.getLogger('graphview')
    logger.setLevel(level)

    # Clear existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Rendering libraries are chatty at DEBUG
    logging.getLogger('matplotlib').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)
    logging.getLogger('graphviz').setLevel(logging.WARNING)


@lru_cache()
def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with consistent configuration.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    setup_logging()

    return logging.getLogger(name)
