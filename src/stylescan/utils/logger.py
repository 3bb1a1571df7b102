"""Logging helper for stylescan.

The library never configures handlers; applications decide where records go.

Example:
    >>> from stylescan.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("tokenizing %d chars", 120)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``stylescan`` namespace.

    Example:
        >>> get_logger("tree").name
        'stylescan.tree'
        >>> get_logger("stylescan.tree").name
        'stylescan.tree'
    """
    if not (name == "stylescan" or name.startswith("stylescan.")):
        name = f"stylescan.{name}"
    return logging.getLogger(name)
