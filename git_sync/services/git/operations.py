"""Git operations service"""

import re
from typing import List, Optional, Tuple

import git

from git_sync.constants import HEADS_PREFIX
from git_sync.exceptions import FetchError, GitOperationError, NotARepositoryError
from git_sync.models.remote import RemoteUrl
from git_sync.services.git.ref_store import RefStore
from git_sync.utils.logging import get_logger

logger = get_logger(__name__)

_REMOTE_LINE_RE = re.compile(r"^(\S+)\s+(.+?)\s+\((fetch|push)\)$")


def _error_text(error: git.exc.GitCommandError) -> str:
    """Extract git's own message from a GitCommandError."""
    stderr = (error.stderr if hasattr(error, "stderr") else str(error)) or ""
    stderr = stderr.strip()
    # GitPython formats stderr as "stderr: '<text>'"
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:"):].strip().strip("'").strip()
    # Advice lines ("hint: ...") are for interactive use
    stderr = "\n".join(
        line for line in stderr.splitlines() if line.strip() and not line.startswith("hint:")
    )
    if stderr:
        return stderr
    status = error.status if hasattr(error, "status") else "unknown"
    return f"'{error.command}' failed with exit code {status}"


class GitOperations(RefStore):
    """RefStore backed by the git command line through GitPython."""

    def __init__(self, repo_path: str):
        """Open the repository containing `repo_path`.

        Args:
            repo_path: Path inside the git repository

        Raises:
            NotARepositoryError: if no repository with a working tree contains the path
        """
        try:
            self.repo = git.Repo(repo_path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError):
            raise NotARepositoryError(repo_path)
        if self.repo.bare:
            raise NotARepositoryError(repo_path)

        self.repo_path = self.repo.working_tree_dir
        logger.info(f"Git operations initialized for {self.repo_path}")

    def list_remotes(self) -> List[RemoteUrl]:
        """List configured remote URLs in discovery order."""
        try:
            output = self.repo.git.remote("-v")
        except git.exc.GitCommandError as e:
            raise GitOperationError("list_remotes", message=_error_text(e))

        remotes = []
        for line in output.splitlines():
            match = _REMOTE_LINE_RE.match(line.strip())
            if match:
                remotes.append(RemoteUrl(*match.groups()))
        logger.debug(f"Found {len(remotes)} remote URLs")
        return remotes

    def fetch_from_remote(self, name: str) -> None:
        """Fetch from a remote, pruning stale remote-tracking refs."""
        logger.debug(f"Fetching from {name}...")
        try:
            self.repo.git.fetch("--prune", "--quiet", name)
        except git.exc.GitCommandError as e:
            raise FetchError(name, _error_text(e))

    def resolve_symbolic_ref(self, name: str) -> Optional[str]:
        """Return the ref a symbolic ref points to, or None."""
        try:
            ref = self.repo.git.symbolic_ref("-q", name)
        except git.exc.GitCommandError as e:
            logger.debug(f"Symbolic ref {name} did not resolve: {_error_text(e)}")
            return None
        return ref.strip() or None

    def resolve_full_name(self, revision: str) -> Optional[str]:
        """Return the full ref name a revision resolves to, or None."""
        try:
            output = self.repo.git.rev_parse("--symbolic-full-name", revision)
        except git.exc.GitCommandError as e:
            logger.debug(f"Revision {revision} did not resolve: {_error_text(e)}")
            return None
        lines = output.splitlines()
        return lines[0].strip() if lines and lines[0].strip() else None

    def get_config_values(self, key_pattern: str) -> List[str]:
        """Return raw `key value` config lines matching a key or glob pattern."""
        mode = "--get-regexp" if "*" in key_pattern else "--get-all"
        try:
            output = self.repo.git.config(mode, key_pattern)
        except git.exc.GitCommandError as e:
            # Exit status 1 means the key is not set
            if e.status == 1:
                return []
            raise GitOperationError("config", message=_error_text(e))
        return [line for line in output.splitlines() if line.strip()]

    def list_local_branches(self) -> List[str]:
        """List local branch names in ref-name order."""
        try:
            output = self.repo.git.for_each_ref("--format=%(refname)", "refs/heads")
        except git.exc.GitCommandError as e:
            raise GitOperationError("list_branches", message=_error_text(e))

        return [
            line[len(HEADS_PREFIX):]
            for line in output.splitlines()
            if line.startswith(HEADS_PREFIX)
        ]

    def ref_path_exists(self, *segments: str) -> bool:
        """Check whether a ref exists, loose or packed."""
        ref = "/".join(segment.strip("/") for segment in segments if segment)
        try:
            self.repo.git.show_ref("--verify", "--quiet", ref)
            return True
        except git.exc.GitCommandError:
            return False

    def resolve_revision_pair(self, a: str, b: str) -> Tuple[str, str]:
        """Resolve two revisions to object ids."""
        try:
            output = self.repo.git.rev_parse("-q", a, b)
        except git.exc.GitCommandError as e:
            raise GitOperationError("rev_parse", message=f"can't resolve {a}..{b}: {_error_text(e)}")

        lines = output.splitlines()
        if len(lines) != 2:
            raise GitOperationError("rev_parse", message=f"can't parse range {a}..{b}")
        return lines[0].strip(), lines[1].strip()

    def is_ancestor(self, a: str, b: str) -> bool:
        """Check whether `a` is an ancestor of (or equal to) `b`."""
        try:
            return self.repo.is_ancestor(a, b)
        except git.exc.GitCommandError as e:
            raise GitOperationError("merge_base", message=_error_text(e))

    def fast_forward_merge(self, target: str) -> None:
        """Fast-forward the checked out branch to `target`; never creates a merge commit."""
        logger.debug(f"Fast-forwarding working tree to {target}")
        try:
            self.repo.git.merge("--ff-only", "--quiet", target)
        except git.exc.GitCommandError as e:
            raise GitOperationError("merge", message=_error_text(e))

    def update_branch_ref(self, branch: str, new_target: str, old_target: Optional[str] = None) -> None:
        """Point a branch that is not checked out at `new_target`."""
        args = ["-m", f"git-sync: fast-forward to {new_target}", f"{HEADS_PREFIX}{branch}", new_target]
        if old_target:
            args.append(old_target)
        logger.debug(f"Updating {branch} to {new_target}")
        try:
            self.repo.git.update_ref(*args)
        except git.exc.GitCommandError as e:
            raise GitOperationError("update_ref", branch, _error_text(e))

    def checkout_branch(self, name: str, start_point: Optional[str] = None) -> None:
        """Switch the working tree to a branch.

        When the branch does not exist locally and `start_point` is given, the
        branch is created there and set to track it. A bare `git checkout <name>`
        would instead guess among every remote carrying `<name>`.
        """
        args = ["--quiet", name]
        if start_point and not self.ref_path_exists(*f"{HEADS_PREFIX}{name}".split("/")):
            args = ["--quiet", "--track", "-b", name, start_point]
        logger.debug(f"Checking out {name}")
        try:
            self.repo.git.checkout(*args)
        except git.exc.GitCommandError as e:
            raise GitOperationError("checkout", name, _error_text(e))

    def delete_branch(self, name: str, merged_into: str) -> None:
        """Delete a local branch, refusing unless it is contained in `merged_into`."""
        if not self.is_ancestor(f"{HEADS_PREFIX}{name}", merged_into):
            raise GitOperationError("delete_branch", name, f"not merged into {merged_into}")

        logger.debug(f"Deleting local branch {name}")
        try:
            # -D because `git branch -d` checks against HEAD, not `merged_into`
            self.repo.git.branch("-D", name)
        except git.exc.GitCommandError as e:
            raise GitOperationError("delete_branch", name, _error_text(e))
