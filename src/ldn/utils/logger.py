"""Minimal logging utilities for LDN.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications (and the ``python -m ldn``
command) decide where records go.

Example:
    >>> from ldn.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("parsed %d items", 3)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name, namespaced under ``ldn.``.

    Example:
        >>> get_logger("mymodule").name
        'ldn.mymodule'
    """
    if not (name == "ldn" or name.startswith("ldn.")):
        name = f"ldn.{name}"
    return logging.getLogger(name)
