"""Tests for RemoteSelector"""
import pytest

from git_sync.exceptions import NoRemotesConfiguredError, RemoteNotFoundError
from git_sync.models.remote import RemoteUrl
from git_sync.services.remote_selector import RemoteSelector


def _urls(*names):
    entries = []
    for name in names:
        entries.append(RemoteUrl(name, f"git@example.com:{name}/repo.git", "fetch"))
        entries.append(RemoteUrl(name, f"git@example.com:{name}/repo.git", "push"))
    return entries


class TestCollapse:
    """Test collapsing `git remote -v` entries."""

    def test_fetch_and_push_collapse_into_one_remote(self):
        entries = [
            RemoteUrl("origin", "https://example.com/fetch.git", "fetch"),
            RemoteUrl("origin", "git@example.com:push.git", "push"),
        ]
        remotes = RemoteSelector.collapse(entries)
        assert len(remotes) == 1
        assert remotes[0].name == "origin"
        assert remotes[0].fetch_url == "https://example.com/fetch.git"
        assert remotes[0].push_url == "git@example.com:push.git"

    def test_discovery_order_is_kept(self):
        remotes = RemoteSelector.collapse(_urls("zeta", "alpha", "mid"))
        assert [r.name for r in remotes] == ["zeta", "alpha", "mid"]


class TestSelect:
    """Test main remote selection."""

    def test_upstream_wins_over_origin(self):
        assert RemoteSelector().select(_urls("origin", "upstream")).name == "upstream"

    def test_github_wins_over_origin(self):
        assert RemoteSelector().select(_urls("origin", "github", "fork")).name == "github"

    def test_origin_wins_over_unknown_names(self):
        assert RemoteSelector().select(_urls("fork", "origin")).name == "origin"

    def test_fallback_is_first_discovered(self):
        selector = RemoteSelector()
        assert selector.select(_urls("fork", "backup")).name == "fork"
        # Same input, same answer
        assert selector.select(_urls("fork", "backup")).name == "fork"

    def test_order_puts_preferred_names_first(self):
        ordered = RemoteSelector().order(_urls("fork", "origin", "upstream"))
        assert [r.name for r in ordered] == ["upstream", "origin", "fork"]

    def test_custom_priority(self):
        selector = RemoteSelector(priority=["company", "origin"])
        assert selector.select(_urls("origin", "company")).name == "company"

    def test_no_remotes(self):
        with pytest.raises(NoRemotesConfiguredError):
            RemoteSelector().select([])

    def test_forced_remote(self):
        selector = RemoteSelector(forced="fork")
        assert selector.select(_urls("origin", "fork")).name == "fork"

    def test_forced_remote_missing(self):
        selector = RemoteSelector(forced="fork")
        with pytest.raises(RemoteNotFoundError):
            selector.select(_urls("origin"))
