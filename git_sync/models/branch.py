"""Branch model and reconciliation types"""
from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional

from git_sync.constants import HEADS_PREFIX, SHORT_SHA_LENGTH


@dataclass(frozen=True)
class Branch:
    """A local branch."""
    name: str

    @property
    def ref(self) -> str:
        return f"{HEADS_PREFIX}{self.name}"


class LinkKind(Enum):
    """How a local branch relates to the main remote."""
    TRACKED_ON_MAIN_REMOTE = "tracked"
    GONE = "gone"
    TRACKS_OTHER_REMOTE = "other-remote"
    UNTRACKED_BUT_MIRRORED = "mirrored"


@dataclass(frozen=True)
class UpstreamLink:
    """Resolved upstream of a branch. `ref` is set for tracked and mirrored links."""
    kind: LinkKind
    ref: Optional[str] = None

    @classmethod
    def tracked(cls, ref: str) -> "UpstreamLink":
        return cls(LinkKind.TRACKED_ON_MAIN_REMOTE, ref)

    @classmethod
    def gone(cls) -> "UpstreamLink":
        return cls(LinkKind.GONE)

    @classmethod
    def other_remote(cls) -> "UpstreamLink":
        return cls(LinkKind.TRACKS_OTHER_REMOTE)

    @classmethod
    def mirrored(cls, ref: str) -> "UpstreamLink":
        return cls(LinkKind.UNTRACKED_BUT_MIRRORED, ref)


class AncestryFact(Enum):
    """Relationship between a local tip A and a candidate tip B."""
    IDENTICAL = "identical"
    A_IS_ANCESTOR_OF_B = "ancestor"
    DIVERGED = "diverged"


@dataclass(frozen=True)
class Comparison:
    """Result of comparing two refs, with the object ids they resolved to."""
    fact: AncestryFact
    old_tip: str
    new_tip: str


class Action(Enum):
    """What the reconciliation does with a branch."""
    NO_OP = "no-op"
    FAST_FORWARD = "fast-forward"
    DELETE = "delete"
    WARN_DIVERGED = "warn-diverged"
    WARN_UNMERGED = "warn-unmerged"


@dataclass(frozen=True)
class Decision:
    """Classifier output for one branch. Never modified after classification."""
    action: Action
    target: Optional[str] = None  # ref fast-forwarded to, or ref the branch is merged into
    reason: Optional[str] = None
    old_tip: Optional[str] = None
    new_tip: Optional[str] = None

    @classmethod
    def no_op(cls) -> "Decision":
        return cls(Action.NO_OP)

    @classmethod
    def fast_forward(cls, target: str, old_tip: str, new_tip: str) -> "Decision":
        return cls(Action.FAST_FORWARD, target=target, old_tip=old_tip, new_tip=new_tip)

    @classmethod
    def delete(cls, target: str, reason: str, old_tip: str) -> "Decision":
        return cls(Action.DELETE, target=target, reason=reason, old_tip=old_tip)

    @classmethod
    def warn_diverged(cls, target: str) -> "Decision":
        return cls(Action.WARN_DIVERGED, target=target)

    @classmethod
    def warn_unmerged(cls, target: str) -> "Decision":
        return cls(Action.WARN_UNMERGED, target=target)

    @property
    def short_old_tip(self) -> str:
        return (self.old_tip or "")[:SHORT_SHA_LENGTH]


class Outcome(Enum):
    """What happened when a decision was applied."""
    APPLIED = "applied"
    SKIPPED = "skipped"
    WARNED = "warned"


@dataclass
class BranchResult:
    """Outcome of reconciling one branch."""
    branch: Branch
    decision: Decision
    outcome: Outcome
    message: Optional[str] = None  # Underlying git error for failed actions


@dataclass
class RunState:
    """Mutable state of a reconciliation run."""
    current_branch: Optional[str]  # None when HEAD is detached


@dataclass
class SyncReport:
    """Everything a run did."""
    remote: str
    default_branch: str
    results: List[BranchResult] = field(default_factory=list)
    current_branch: Optional[str] = None

    def _count(self, action: Action, outcome: Outcome) -> int:
        return sum(
            1 for r in self.results if r.decision.action == action and r.outcome == outcome
        )

    @property
    def updated(self) -> int:
        return self._count(Action.FAST_FORWARD, Outcome.APPLIED)

    @property
    def deleted(self) -> int:
        return self._count(Action.DELETE, Outcome.APPLIED)

    @property
    def warnings(self) -> int:
        return sum(1 for r in self.results if r.outcome == Outcome.WARNED)
