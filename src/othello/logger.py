"""
Logging utilities for Othello.
"""
import os
import logging
from typing import List

from .config import Config

LOGGER_NAME = "othello"
FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Handlers installed by setup_logging, removed again on the next call
_handlers: List[logging.Handler] = []


def setup_logging(config: Config) -> logging.Logger:
    """
    Configure the package logger from the logging section of the config.

    Args:
        config: Configuration object

    Returns:
        The configured 'othello' logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = getattr(logging, config.logging.log_level.upper(), logging.INFO)
    logger.setLevel(level)

    close_logging()
    logger.propagate = False

    formatter = logging.Formatter(FORMAT)

    # Set up console logging
    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    _handlers.append(console)

    # Set up file logging
    if config.logging.log_file:
        log_dir = os.path.dirname(os.path.abspath(config.logging.log_file))
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(config.logging.log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        _handlers.append(file_handler)

    for handler in _handlers:
        logger.addHandler(handler)

    return logger


def close_logging():
    """Remove and close the handlers installed by setup_logging, then propagate to root again."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in _handlers:
        logger.removeHandler(handler)
        handler.close()
    _handlers.clear()
    logger.propagate = True
