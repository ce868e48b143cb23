"""Service for picking the main remote"""

from typing import Iterable, List, Optional

from git_sync.constants import REMOTE_PRIORITY
from git_sync.exceptions import NoRemotesConfiguredError, RemoteNotFoundError
from git_sync.models.remote import Remote, RemoteUrl
from git_sync.utils.logging import get_logger

logger = get_logger(__name__)


class RemoteSelector:
    """Picks the single remote a run reconciles against."""

    def __init__(self, priority: Optional[List[str]] = None, forced: Optional[str] = None):
        """Initialize the selector.

        Args:
            priority: Remote names to prefer, in order
            forced: Name of a remote to use regardless of priority
        """
        self.priority = list(priority) if priority else list(REMOTE_PRIORITY)
        self.forced = forced

    @staticmethod
    def collapse(entries: Iterable[RemoteUrl]) -> List[Remote]:
        """Merge fetch/push URL entries into one Remote per name, in discovery order."""
        remotes = {}
        for entry in entries:
            remote = remotes.setdefault(entry.name, Remote(entry.name))
            if entry.kind == "fetch":
                remote.fetch_url = entry.url
            elif entry.kind == "push":
                remote.push_url = entry.url
        return list(remotes.values())

    def order(self, entries: Iterable[RemoteUrl]) -> List[Remote]:
        """Return the configured remotes, preferred names first."""
        remaining = self.collapse(entries)
        ordered = []
        for name in self.priority:
            for remote in remaining:
                if remote.name == name:
                    ordered.append(remote)
                    remaining.remove(remote)
                    break
        return ordered + remaining

    def select(self, entries: Iterable[RemoteUrl]) -> Remote:
        """Return the main remote.

        Raises:
            NoRemotesConfiguredError: if no remote is configured
            RemoteNotFoundError: if the forced remote is not configured
        """
        remotes = self.order(entries)
        if not remotes:
            raise NoRemotesConfiguredError()

        if self.forced:
            for remote in remotes:
                if remote.name == self.forced:
                    logger.debug(f"Using forced remote {remote.name}")
                    return remote
            raise RemoteNotFoundError(self.forced)

        logger.debug(f"Main remote is {remotes[0].name} (of {', '.join(r.name for r in remotes)})")
        return remotes[0]
