"""Core functionality for git-sync."""

from .branch_syncer import BranchSyncer

__all__ = ["BranchSyncer"]
