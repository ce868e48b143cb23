"""Configuration handling for git-sync"""

from dataclasses import dataclass, field
from typing import Optional, List

from git_sync.constants import REMOTE_PRIORITY, DEFAULT_BRANCH_CANDIDATES


@dataclass
class Config:
    """Configuration for git-sync with validation."""

    # Remote selection
    remote: Optional[str] = None  # Force a specific remote instead of the priority list
    remote_priority: List[str] = field(default_factory=lambda: list(REMOTE_PRIORITY))
    default_branches: List[str] = field(default_factory=lambda: list(DEFAULT_BRANCH_CANDIDATES))

    # Execution modes
    fetch: bool = True
    dry_run: bool = False
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_remote()
        self._validate_remote_priority()
        self._validate_default_branches()

    def _validate_remote(self):
        """Validate remote is not blank when given."""
        if self.remote is None:
            return
        if not self.remote.strip():
            raise ValueError("remote cannot be empty")
        self.remote = self.remote.strip()

    def _validate_remote_priority(self):
        """Validate remote_priority is a non-empty list of names."""
        if not isinstance(self.remote_priority, list):
            raise ValueError("remote_priority must be a list")
        if not self.remote_priority:
            raise ValueError("remote_priority cannot be empty")

    def _validate_default_branches(self):
        """Validate default_branches is a non-empty list of names."""
        if not isinstance(self.default_branches, list):
            raise ValueError("default_branches must be a list")
        cleaned = [name.strip() for name in self.default_branches if name and name.strip()]
        if not cleaned:
            raise ValueError("default_branches cannot be empty")
        self.default_branches = cleaned

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "remote": self.remote,
            "remote_priority": self.remote_priority,
            "default_branches": self.default_branches,
            "fetch": self.fetch,
            "dry_run": self.dry_run,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        # Extract only known fields
        known_fields = {
            "remote",
            "remote_priority",
            "default_branches",
            "fetch",
            "dry_run",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
