"""Data models for git-sync."""

from .remote import Remote, RemoteUrl
from .branch import (
    Action,
    AncestryFact,
    Branch,
    BranchResult,
    Comparison,
    Decision,
    LinkKind,
    Outcome,
    RunState,
    SyncReport,
    UpstreamLink,
)

__all__ = [
    "Remote",
    "RemoteUrl",
    "Action",
    "AncestryFact",
    "Branch",
    "BranchResult",
    "Comparison",
    "Decision",
    "LinkKind",
    "Outcome",
    "RunState",
    "SyncReport",
    "UpstreamLink",
]
