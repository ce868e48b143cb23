"""Report line formatting."""

from rich.markup import escape

from git_sync.constants import CLI_COLORS, ReportStyleType
from git_sync.models.branch import Action, BranchResult, Outcome, SyncReport
from git_sync.services.git.ref_store import branch_short_name


def get_result_style_type(result: BranchResult) -> str:
    """
    Determine the style type of a result.

    Args:
        result: Reconciliation result

    Returns:
        ReportStyleType constant
    """
    if result.outcome == Outcome.WARNED:
        return ReportStyleType.WARNING
    if result.outcome == Outcome.SKIPPED:
        return ReportStyleType.SKIPPED
    if result.decision.action == Action.DELETE:
        return ReportStyleType.DELETED
    return ReportStyleType.UPDATED


def format_result(result: BranchResult, remote: str) -> str:
    """
    Format a result as a Rich markup line.

    Args:
        result: Reconciliation result
        remote: Name of the main remote

    Returns:
        Markup string, e.g. "[green]Updated branch[/green] [bold green]topic[/bold green] (was 1a2b3c4)."
    """
    decision = result.decision
    name = escape(result.branch.name)
    color = CLI_COLORS[get_result_style_type(result)]

    if result.outcome == Outcome.WARNED:
        if result.message:
            verb = {Action.DELETE: "delete", Action.FAST_FORWARD: "update"}.get(
                decision.action, "check"
            )
            text = f"warning: could not {verb} '{name}': {escape(result.message)}"
        elif decision.action == Action.WARN_UNMERGED:
            default = escape(branch_short_name(decision.target or ""))
            text = (
                f"warning: '{name}' was deleted on {escape(remote)}, "
                f"but appears not merged into '{default}'"
            )
        else:
            text = f"warning: '{name}' seems to contain unpushed commits"
        return f"[{color}]{text}[/{color}]"

    tip = decision.short_old_tip
    prefix = "Would " if result.outcome == Outcome.SKIPPED else ""

    if decision.action == Action.DELETE:
        verb = "delete" if prefix else "Deleted"
        merged_into = escape(branch_short_name(decision.target or ""))
        detail = f"was {tip}, {decision.reason} into {escape(remote)}/{merged_into}"
    else:
        verb = "update" if prefix else "Updated"
        detail = f"was {tip}"

    return f"[{color}]{prefix}{verb} branch[/{color}] [bold {color}]{name}[/bold {color}] ({detail})."


def format_summary(report: SyncReport) -> str:
    """
    Format the closing summary of a run.

    Example:
        "2 updated, 1 deleted, 0 warnings"
    """
    return f"{report.updated} updated, {report.deleted} deleted, {report.warnings} warnings"
