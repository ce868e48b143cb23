"""Service for resolving the upstream of each local branch"""

import re
from typing import Dict, List

from git_sync.constants import REMOTES_PREFIX
from git_sync.models.branch import Branch, UpstreamLink
from git_sync.services.git.ref_store import RefStore
from git_sync.utils.logging import get_logger

logger = get_logger(__name__)

_BRANCH_REMOTE_RE = re.compile(r"^branch\.(.+?)\.remote (.+)")


class UpstreamResolver:
    """Works out how each local branch relates to the main remote."""

    def __init__(self, ref_store: RefStore, remote: str):
        """Initialize the resolver.

        Args:
            ref_store: RefStore to query
            remote: Name of the main remote
        """
        self.ref_store = ref_store
        self.remote = remote
        self._branch_remotes = None

    @property
    def branch_remotes(self) -> Dict[str, str]:
        """Mapping of branch name to its configured `branch.<name>.remote`, read once."""
        if self._branch_remotes is None:
            self._branch_remotes = self.parse_branch_remotes(
                self.ref_store.get_config_values("branch.*.remote")
            )
        return self._branch_remotes

    @staticmethod
    def parse_branch_remotes(lines: List[str]) -> Dict[str, str]:
        """Parse `branch.<name>.remote <remote>` config lines."""
        branch_remotes = {}
        for line in lines:
            match = _BRANCH_REMOTE_RE.match(line)
            if match:
                branch_remotes[match.group(1)] = match.group(2).strip()
        return branch_remotes

    def resolve(self, branch: Branch) -> UpstreamLink:
        """Resolve one branch's upstream link. Never raises for a missing upstream."""
        configured = self.branch_remotes.get(branch.name)

        if configured == self.remote:
            upstream = self.ref_store.resolve_full_name(f"{branch.name}@{{upstream}}")
            if upstream:
                logger.debug(f"{branch.name} tracks {upstream}")
                return UpstreamLink.tracked(upstream)
            logger.debug(f"{branch.name} tracks {self.remote} but its upstream is gone")
            return UpstreamLink.gone()

        mirror = f"{REMOTES_PREFIX}{self.remote}/{branch.name}"
        if self.ref_store.ref_path_exists(*mirror.split("/")):
            logger.debug(f"{branch.name} is mirrored by {mirror}")
            return UpstreamLink.mirrored(mirror)

        if configured:
            logger.debug(f"{branch.name} tracks other remote {configured}")
        else:
            logger.debug(f"{branch.name} has no upstream on {self.remote}")
        return UpstreamLink.other_remote()

    def resolve_all(self, branches: List[Branch]) -> Dict[str, UpstreamLink]:
        """Resolve every branch, keyed by branch name."""
        return {branch.name: self.resolve(branch) for branch in branches}
