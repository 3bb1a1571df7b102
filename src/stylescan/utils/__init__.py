"""Utility modules for stylescan.

Contains:
- logger: get_logger for logging
"""

from __future__ import annotations

from stylescan.utils.logger import get_logger

__all__ = [
    "get_logger",
]
