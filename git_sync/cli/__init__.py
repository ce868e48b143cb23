"""Command-line interface for git-sync.

This package provides the CLI entry point and argument parsing.
"""

from .app import main
from .args import parse_args

__all__ = ["main", "parse_args"]
