"""Utility functions for git-sync.

This package provides utility modules:
- logging: Logging configuration and logger creation
"""

from .logging import setup_logging, get_logger, ColoredFormatter

__all__ = [
    "setup_logging",
    "get_logger",
    "ColoredFormatter",
]
