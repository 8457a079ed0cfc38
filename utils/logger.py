# utils/logger.py

import logging
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Returns a logger instance with the given name.

    A StreamHandler is attached only the first time a name is requested,
    so repeated calls don't duplicate output.

    Args:
        name (str): The name for the logger.
        level (int, optional): Logging level. Defaults to INFO.

    Returns:
        logging.Logger: The logger instance.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(LOG_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level if level is not None else logging.INFO)
    return logger


def set_log_level(level: int, *names: str) -> None:
    """Changes the level of already-created loggers (used by --debug)."""
    for name in names:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
