"""Git-related services for git-sync."""

from .ref_store import RefStore, branch_short_name
from .operations import GitOperations

__all__ = [
    "RefStore",
    "GitOperations",
    "branch_short_name",
]
