"""Applies classifier decisions to the repository"""

from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from git_sync.constants import REMOTES_PREFIX
from git_sync.exceptions import GitOperationError
from git_sync.models.branch import Action, Branch, BranchResult, Decision, Outcome, RunState
from git_sync.services.git.ref_store import RefStore
from git_sync.utils.logging import get_logger

if TYPE_CHECKING:
    from git_sync.services.display_service import DisplayService

logger = get_logger(__name__)


class ReconciliationEngine:
    """Applies one Decision per branch, in order, tracking the checked out branch."""

    def __init__(
        self,
        ref_store: RefStore,
        remote: str,
        default_branch: str,
        reporter: Optional["DisplayService"] = None,
        dry_run: bool = False,
    ):
        """Initialize the engine.

        Args:
            ref_store: RefStore to apply actions through
            remote: Name of the main remote, for reporting and for creating a
                missing local default branch
            default_branch: Short name of the default branch, checked out before
                deleting the current branch
            reporter: DisplayService that renders each result as it is produced
            dry_run: If True, report what would be done without changing anything
        """
        self.ref_store = ref_store
        self.remote = remote
        self.default_branch = default_branch
        self.reporter = reporter
        self.dry_run = dry_run

    def run(
        self, plan: Sequence[Tuple[Branch, Decision]], current_branch: Optional[str]
    ) -> Tuple[List[BranchResult], RunState]:
        """Apply every decision in plan order.

        Args:
            plan: (branch, decision) pairs in branch-listing order
            current_branch: Branch checked out when the run started

        Returns:
            Tuple of (results, final run state). NoOp decisions produce no result.
        """
        state = RunState(current_branch=current_branch)
        results = []

        for branch, decision in plan:
            result = self.apply(branch, decision, state)
            if result is None:
                continue
            results.append(result)
            if self.reporter:
                self.reporter.report(result, self.remote)

        return results, state

    def apply(self, branch: Branch, decision: Decision, state: RunState) -> Optional[BranchResult]:
        """Apply a single decision. Failures become a WARNED result, never an exception."""
        if decision.action == Action.NO_OP:
            return None

        if decision.action in (Action.WARN_DIVERGED, Action.WARN_UNMERGED):
            logger.debug(f"Leaving {branch.name} untouched ({decision.action.value})")
            return BranchResult(branch, decision, Outcome.WARNED)

        if self.dry_run:
            logger.debug(f"Dry run: skipping {decision.action.value} of {branch.name}")
            return BranchResult(branch, decision, Outcome.SKIPPED)

        try:
            if decision.action == Action.FAST_FORWARD:
                self._fast_forward(branch, decision, state)
            elif decision.action == Action.DELETE:
                self._delete(branch, decision, state)
        except GitOperationError as e:
            logger.debug(f"{decision.action.value} of {branch.name} failed: {e}")
            return BranchResult(branch, decision, Outcome.WARNED, message=e.message or str(e))

        return BranchResult(branch, decision, Outcome.APPLIED)

    def _fast_forward(self, branch: Branch, decision: Decision, state: RunState) -> None:
        if branch.name == state.current_branch:
            # The working tree has to move with the branch
            self.ref_store.fast_forward_merge(decision.new_tip)
        else:
            self.ref_store.update_branch_ref(branch.name, decision.new_tip, decision.old_tip)
        logger.info(f"Fast-forwarded {branch.name} to {decision.target}")

    def _delete(self, branch: Branch, decision: Decision, state: RunState) -> None:
        if branch.name == state.current_branch:
            self.ref_store.checkout_branch(
                self.default_branch, f"{REMOTES_PREFIX}{self.remote}/{self.default_branch}"
            )
            state.current_branch = self.default_branch
            logger.info(f"Switched from {branch.name} to {self.default_branch}")
        self.ref_store.delete_branch(branch.name, decision.target)
        logger.info(f"Deleted {branch.name} ({decision.reason} into {decision.target})")
