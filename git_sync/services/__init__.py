"""Services for git-sync."""
