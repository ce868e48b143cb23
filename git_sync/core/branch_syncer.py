"""Core functionality for git-sync"""

from typing import List, Optional, Tuple, Union

from git_sync.config import Config
from git_sync.constants import REMOTES_PREFIX
from git_sync.exceptions import DefaultBranchError, GitOperationError
from git_sync.models.branch import Branch, BranchResult, Decision, Outcome, SyncReport
from git_sync.services.branch_classifier import BranchClassifier, ancestry_lookup
from git_sync.services.display_service import DisplayService
from git_sync.services.git import GitOperations, RefStore
from git_sync.services.reconciliation_engine import ReconciliationEngine
from git_sync.services.remote_selector import RemoteSelector
from git_sync.services.upstream_resolver import UpstreamResolver
from git_sync.utils.logging import get_logger

logger = get_logger(__name__)


class BranchSyncer:
    """Reconciles local branches with the main remote."""

    def __init__(
        self,
        repo_path: str,
        config: Union[Config, dict],
        ref_store: Optional[RefStore] = None,
        display_service: Optional[DisplayService] = None,
    ):
        """Initialize BranchSyncer.

        Args:
            repo_path: Path inside the git repository
            config: Configuration dict or Config object
            ref_store: RefStore to use (default: GitOperations on repo_path)
            display_service: Reporter for results (default: a DisplayService on stdout/stderr)

        Raises:
            NotARepositoryError: if repo_path is not inside a repository
        """
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config
        self.ref_store = ref_store or GitOperations(repo_path)
        self.display_service = display_service or DisplayService(verbose=self.config.verbose)
        self.remote_selector = RemoteSelector(self.config.remote_priority, self.config.remote)

    def run(self) -> SyncReport:
        """Fetch, classify every local branch and apply the decisions.

        Raises:
            GitSyncError: on setup failures (no remote, fetch failure, no default branch)
        """
        remote = self.remote_selector.select(self.ref_store.list_remotes()).name
        current_branch = self.ref_store.current_branch()
        logger.info(f"Main remote: {remote}, current branch: {current_branch or '(detached)'}")

        if self.config.fetch:
            self.ref_store.fetch_from_remote(remote)
        else:
            logger.info("Skipping fetch")

        default_branch = self.resolve_default_branch(remote)
        default_ref = f"{REMOTES_PREFIX}{remote}/{default_branch}"
        logger.info(f"Default branch: {default_ref}")

        branches = [Branch(name) for name in self.ref_store.list_local_branches()]
        plan, failures = self.plan(branches, remote, default_ref)
        for failure in failures:
            self.display_service.report(failure, remote)

        engine = ReconciliationEngine(
            self.ref_store,
            remote,
            default_branch,
            reporter=self.display_service,
            dry_run=self.config.dry_run,
        )
        results, state = engine.run(plan, current_branch)

        report = SyncReport(
            remote=remote,
            default_branch=default_branch,
            results=failures + results,
            current_branch=state.current_branch,
        )
        self.display_service.display_summary(report)
        return report

    def resolve_default_branch(self, remote: str) -> str:
        """Short name of the remote's default branch.

        Uses `refs/remotes/<remote>/HEAD`, falling back to the configured
        candidate names that exist on the remote.

        Raises:
            DefaultBranchError: if no candidate exists
        """
        prefix = f"{REMOTES_PREFIX}{remote}/"
        head = self.ref_store.resolve_symbolic_ref(f"{prefix}HEAD")
        if head and head.startswith(prefix):
            name = head[len(prefix):]
            if self.ref_store.ref_path_exists("refs", "remotes", remote, name):
                return name
            logger.debug(f"{head} does not exist, trying {self.config.default_branches}")

        for candidate in self.config.default_branches:
            if self.ref_store.ref_path_exists("refs", "remotes", remote, candidate):
                return candidate

        raise DefaultBranchError(remote, self.config.default_branches)

    def plan(
        self, branches: List[Branch], remote: str, default_ref: str
    ) -> Tuple[List[Tuple[Branch, Decision]], List[BranchResult]]:
        """Classify every branch.

        Returns:
            Tuple of (plan, failures): (branch, decision) pairs in branch order, and
            WARNED results for branches whose refs could not be compared.
        """
        resolver = UpstreamResolver(self.ref_store, remote)
        classifier = BranchClassifier(ancestry_lookup(self.ref_store), default_ref)

        plan = []
        failures = []
        for branch in branches:
            try:
                decision = classifier.classify(branch, resolver.resolve(branch))
            except GitOperationError as e:
                logger.debug(f"Could not classify {branch.name}: {e}")
                failures.append(
                    BranchResult(branch, Decision.no_op(), Outcome.WARNED, message=e.message or str(e))
                )
                continue
            logger.debug(f"{branch.name}: {decision.action.value}")
            plan.append((branch, decision))
        return plan, failures
