"""Capability interface over the version-control engine.

Everything git-sync decides is computed from the answers to these queries,
and everything it changes goes through these commands. `GitOperations` is
the GitPython-backed implementation; tests substitute mocks.
"""

import re
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from git_sync.constants import HEADS_PREFIX
from git_sync.models.remote import RemoteUrl

_SHORT_NAME_RE = re.compile(r"^refs/(remotes/)?.+?/")


def branch_short_name(ref: str) -> str:
    """Strip `refs/heads/` or `refs/remotes/<remote>/` from a ref."""
    return _SHORT_NAME_RE.sub("", ref)


class RefStore(ABC):
    """Query and mutation primitives needed for reconciliation."""

    @abstractmethod
    def list_remotes(self) -> List[RemoteUrl]:
        """List configured remote URLs in discovery order."""

    @abstractmethod
    def fetch_from_remote(self, name: str) -> None:
        """Fetch from a remote, pruning stale remote-tracking refs.

        Raises:
            FetchError: if the fetch fails
        """

    @abstractmethod
    def resolve_symbolic_ref(self, name: str) -> Optional[str]:
        """Return the ref a symbolic ref points to, or None."""

    @abstractmethod
    def resolve_full_name(self, revision: str) -> Optional[str]:
        """Return the full ref name a revision such as `x@{upstream}` resolves to, or None."""

    @abstractmethod
    def get_config_values(self, key_pattern: str) -> List[str]:
        """Return raw `key value` config lines; glob patterns such as `branch.*.remote` are allowed."""

    @abstractmethod
    def list_local_branches(self) -> List[str]:
        """List local branch names in ref-name order."""

    @abstractmethod
    def ref_path_exists(self, *segments: str) -> bool:
        """Check whether the ref made of the given path segments exists."""

    @abstractmethod
    def resolve_revision_pair(self, a: str, b: str) -> Tuple[str, str]:
        """Resolve two revisions to object ids.

        Raises:
            GitOperationError: if either revision does not resolve
        """

    @abstractmethod
    def is_ancestor(self, a: str, b: str) -> bool:
        """Check whether `a` is an ancestor of (or equal to) `b`."""

    @abstractmethod
    def fast_forward_merge(self, target: str) -> None:
        """Fast-forward the checked out branch and working tree to `target`."""

    @abstractmethod
    def update_branch_ref(self, branch: str, new_target: str, old_target: Optional[str] = None) -> None:
        """Point a branch that is not checked out at `new_target`.

        When `old_target` is given the update is refused unless the branch
        still points there.
        """

    @abstractmethod
    def checkout_branch(self, name: str, start_point: Optional[str] = None) -> None:
        """Switch the working tree to a branch.

        A branch missing locally is created at `start_point`, tracking it.
        """

    @abstractmethod
    def delete_branch(self, name: str, merged_into: str) -> None:
        """Delete a local branch, refusing unless it is contained in `merged_into`."""

    def current_branch(self) -> Optional[str]:
        """Short name of the checked out branch, or None when HEAD is detached."""
        head = self.resolve_symbolic_ref("HEAD")
        if head is None:
            return None
        if head.startswith(HEADS_PREFIX):
            return head[len(HEADS_PREFIX):]
        return head
