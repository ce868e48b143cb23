"""Shared constants for git-sync."""

# Remote names tried in order when picking the main remote
REMOTE_PRIORITY = ["upstream", "github", "origin"]

# Default branch names tried when <remote>/HEAD is not set
DEFAULT_BRANCH_CANDIDATES = ["main", "master"]

HEADS_PREFIX = "refs/heads/"
REMOTES_PREFIX = "refs/remotes/"

SHORT_SHA_LENGTH = 7

# Reason attached to deletions of branches contained in the default branch
REASON_MERGED = "merged"


class ReportStyleType:
    """Style types for report lines."""

    UPDATED = "updated"
    DELETED = "deleted"
    WARNING = "warning"
    SKIPPED = "skipped"


# CLI colors (Rich color names); the bold variant is used for branch names
CLI_COLORS = {
    ReportStyleType.UPDATED: "green",
    ReportStyleType.DELETED: "red",
    ReportStyleType.WARNING: "yellow",
    ReportStyleType.SKIPPED: "cyan",
}
