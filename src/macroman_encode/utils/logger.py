"""Minimal logging utilities for macroman_encode.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from macroman_encode.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Replacing unmappable character")
"""

from __future__ import annotations

import logging

_ROOT = "macroman_encode"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "macroman_encode." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'macroman_encode.mymodule'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
