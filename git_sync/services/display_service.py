"""Display service for reconciliation results"""
from typing import Optional

from rich.console import Console

from git_sync.formatters import format_result, format_summary
from git_sync.models.branch import BranchResult, Outcome, SyncReport
from git_sync.utils.logging import get_logger

logger = get_logger(__name__)


class DisplayService:
    """Writes applied actions to stdout and warnings to stderr."""

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        verbose: bool = False,
    ):
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)
        self.verbose = verbose

    def report(self, result: BranchResult, remote: str) -> None:
        """Render one result as it is produced."""
        line = format_result(result, remote)
        if result.outcome == Outcome.WARNED:
            self.err_console.print(line)
        else:
            self.console.print(line)

    def display_summary(self, report: SyncReport) -> None:
        """Print the run summary (verbose mode only)."""
        if not self.verbose:
            return
        self.console.print(
            f"[dim]Synced with {report.remote} (default branch {report.default_branch}): "
            f"{format_summary(report)}[/dim]"
        )
