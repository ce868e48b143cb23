"""Formatting utilities for git-sync.

- result: report lines for reconciliation results
"""

from .result import (
    format_result,
    format_summary,
    get_result_style_type,
)

__all__ = [
    "format_result",
    "format_summary",
    "get_result_style_type",
]
