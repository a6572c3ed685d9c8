"""Minimal logging utilities for codetint.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from codetint.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing buffer")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "codetint." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'codetint.mymodule'
    """
    # Ensure codetint prefix for consistent namespacing
    if not (name == "codetint" or name.startswith("codetint.")):
        name = f"codetint.{name}"
    return logging.getLogger(name)
