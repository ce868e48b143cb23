"""Command-line argument parsing for git-sync."""

import argparse
from git_sync.__version__ import __version__


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="git-sync",
        description="Fetch the main remote, fast-forward local branches that are behind it "
        "and delete local branches whose upstream was deleted after being merged",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"git-sync {__version__}")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview mode - show what would be updated or deleted without changing anything",
    )
    parser.add_argument(
        "--no-fetch",
        action="store_true",
        help="Skip fetching and use the remote-tracking refs as they are",
    )
    parser.add_argument(
        "--remote",
        metavar="NAME",
        help="Remote to sync with (default: first of upstream, github, origin, else the first remote)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )

    return parser.parse_args(argv)
