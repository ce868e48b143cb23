"""Custom exceptions for git-sync"""

from typing import Optional


class GitSyncError(Exception):
    """Base exception for all git-sync errors."""
    pass


class GitOperationError(GitSyncError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, branch: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.branch = branch
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if branch:
            error_msg += f" for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class NotARepositoryError(GitSyncError):
    """Exception raised when the working directory is not inside a Git repository."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"not a git repository (or any of the parent directories): {path}")


class NoRemotesConfiguredError(GitSyncError):
    """Exception raised when the repository has no remotes."""

    def __init__(self):
        super().__init__("aborted: no git remotes found")


class RemoteNotFoundError(GitSyncError):
    """Exception raised when a requested remote is not configured."""

    def __init__(self, remote: str):
        self.remote = remote
        super().__init__(f"aborted: remote '{remote}' is not configured")


class FetchError(GitSyncError):
    """Exception raised when fetching from the main remote fails."""

    def __init__(self, remote: str, message: Optional[str] = None):
        self.remote = remote
        self.message = message

        error_msg = f"aborted: could not fetch from '{remote}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class DefaultBranchError(GitSyncError):
    """Exception raised when the remote's default branch cannot be resolved."""

    def __init__(self, remote: str, candidates: Optional[list] = None):
        self.remote = remote
        self.candidates = candidates or []

        error_msg = f"aborted: cannot determine the default branch of '{remote}'"
        if self.candidates:
            tried = ", ".join(f"{remote}/{name}" for name in self.candidates)
            error_msg += f" (tried {remote}/HEAD, {tried})"

        super().__init__(error_msg)
