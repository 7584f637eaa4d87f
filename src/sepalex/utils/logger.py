"""Minimal logging utilities for sepalex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from sepalex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing source")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "sepalex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'sepalex.mymodule'
    """
    if not (name == "sepalex" or name.startswith("sepalex.")):
        name = f"sepalex.{name}"
    return logging.getLogger(name)
