"""Utility functions for nicedata."""

from .logging import configure_logging, get_logger
from .void import is_void

__all__ = [
    "configure_logging",
    "get_logger",
    "is_void",
]
