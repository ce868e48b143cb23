"""Command-line entry point for git-sync"""

import os
import sys

from rich.console import Console
from rich.markup import escape

from git_sync.cli.args import parse_args
from git_sync.config import Config
from git_sync.core import BranchSyncer
from git_sync.exceptions import GitSyncError
from git_sync.services.display_service import DisplayService
from git_sync.utils.logging import setup_logging

console = Console(stderr=True, highlight=False)


def main(argv=None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    try:
        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        config = Config(
            remote=parsed_args.remote,
            fetch=not parsed_args.no_fetch,
            dry_run=parsed_args.dry_run,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if parsed_args.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        syncer = BranchSyncer(
            os.getcwd(), config, display_service=DisplayService(verbose=config.verbose)
        )
        syncer.run()

        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except (GitSyncError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
