"""Tests for the command-line entry point"""
from unittest.mock import patch

import pytest

from git_sync.cli import main, parse_args
from git_sync.config import Config
from git_sync.exceptions import FetchError, NoRemotesConfiguredError


class TestParseArgs:
    """Test argument parsing."""

    def test_no_arguments(self):
        args = parse_args([])
        assert args.verbose is False
        assert args.dry_run is False
        assert args.no_fetch is False
        assert args.remote is None

    def test_all_options(self):
        args = parse_args(["-v", "--dry-run", "--no-fetch", "--remote", "fork", "--debug"])
        assert args.verbose and args.dry_run and args.no_fetch and args.debug
        assert args.remote == "fork"

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "git-sync" in capsys.readouterr().out


class TestMain:
    """Test exit codes."""

    @patch("git_sync.cli.app.setup_logging")
    @patch("git_sync.cli.app.BranchSyncer")
    def test_success(self, mock_syncer, mock_logging):
        assert main([]) == 0
        config = mock_syncer.call_args[0][1]
        assert isinstance(config, Config)
        assert config.fetch is True
        mock_syncer.return_value.run.assert_called_once()

    @patch("git_sync.cli.app.setup_logging")
    @patch("git_sync.cli.app.BranchSyncer")
    def test_options_reach_config(self, mock_syncer, mock_logging):
        main(["--dry-run", "--no-fetch", "--remote", "fork"])
        config = mock_syncer.call_args[0][1]
        assert config.dry_run is True
        assert config.fetch is False
        assert config.remote == "fork"

    @pytest.mark.parametrize("error", [NoRemotesConfiguredError(), FetchError("origin", "timeout")])
    @patch("git_sync.cli.app.setup_logging")
    @patch("git_sync.cli.app.BranchSyncer")
    def test_setup_error_exits_non_zero(self, mock_syncer, mock_logging, error, capsys):
        mock_syncer.return_value.run.side_effect = error
        assert main([]) == 1
        assert "Error:" in capsys.readouterr().err

    @patch("git_sync.cli.app.setup_logging")
    @patch("git_sync.cli.app.BranchSyncer")
    def test_keyboard_interrupt(self, mock_syncer, mock_logging):
        mock_syncer.return_value.run.side_effect = KeyboardInterrupt()
        assert main([]) == 1

    def test_end_to_end_warnings_still_exit_zero(self, remote_repos, make_commit, monkeypatch):
        local = remote_repos.local
        local.git.checkout("-b", "wip")
        make_commit(local, "wip.txt")
        local.git.push("-u", "origin", "wip")
        make_commit(local, "unpushed.txt")
        monkeypatch.chdir(local.working_dir)

        with patch("git_sync.cli.app.setup_logging"):
            assert main([]) == 0
