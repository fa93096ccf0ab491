"""
Design (logging_setup.py)
- Purpose: Route the package's log records to a file inside the assets directory.
- Inputs: Assets directory path, level.
- Outputs: The configured package logger.
- Side effects: Attaches one FileHandler; never logs to the console (keeps the menu clean).
"""

import logging
from pathlib import Path

from .config import LOG_FILENAME, LOG_FORMAT

PACKAGE_LOGGER = "asset_tracker"
FILE_HANDLER_NAME = "asset_tracker.file"


def configure_logging(directory: Path, level: int = logging.INFO) -> logging.Logger:
    """Idempotent: a second call replaces the handler instead of adding another."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if handler.name == FILE_HANDLER_NAME:
            logger.removeHandler(handler)
            handler.close()

    file_handler = logging.FileHandler(directory / LOG_FILENAME, encoding="utf-8")
    file_handler.set_name(FILE_HANDLER_NAME)
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
    logger.propagate = False
    return logger
