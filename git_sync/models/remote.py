"""Remote model"""
from dataclasses import dataclass
from typing import NamedTuple, Optional


class RemoteUrl(NamedTuple):
    """One line of `git remote -v`."""
    name: str
    url: str
    kind: str  # "fetch" or "push"


@dataclass
class Remote:
    """A configured remote with its fetch and push URLs."""
    name: str
    fetch_url: Optional[str] = None
    push_url: Optional[str] = None
