"""
git-sync - Keep local branches in step with their remote
"""

from .__version__ import __version__
from .core import BranchSyncer
from .cli import main

__all__ = ["BranchSyncer", "main", "__version__"]
