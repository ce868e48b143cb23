"""Pytest fixtures for git-sync tests"""
import io
import itertools
import tempfile
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import Mock

import git
import pytest
from rich.console import Console

from git_sync.services.display_service import DisplayService
from git_sync.services.git import RefStore


def _configure_user(repo):
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a configuration dictionary."""
    return {
        'remote': None,
        'remote_priority': ['upstream', 'github', 'origin'],
        'default_branches': ['main', 'master'],
        'fetch': True,
        'dry_run': False,
        'verbose': False,
        'debug': False,
    }


@pytest.fixture
def make_commit():
    """Return a helper that writes a file and commits it on the checked out branch."""
    counter = itertools.count()

    def _commit(repo, filename, content=None, message=None):
        path = Path(repo.working_dir) / filename
        path.write_text(content if content is not None else f"{filename} {next(counter)}\n")
        repo.index.add([filename])
        return repo.index.commit(message or f"Update {filename}")
    return _commit


@pytest.fixture
def remote_repos(temp_dir, make_commit):
    """Create a bare remote, a collaborator clone that pushes to it and a local clone.

    The local clone is the repository under test; the collaborator stands in
    for everyone else changing the remote.
    """
    bare_path = temp_dir / "remote.git"
    bare = git.Repo.init(bare_path, bare=True)
    bare.git.symbolic_ref("HEAD", "refs/heads/main")

    collaborator = git.Repo.init(temp_dir / "collaborator")
    _configure_user(collaborator)
    make_commit(collaborator, "README.md", "# Test Repository\n", "Initial commit")
    collaborator.git.branch("-M", "main")
    collaborator.create_remote("origin", str(bare_path))
    collaborator.git.push("-u", "origin", "main")

    local = git.Repo.clone_from(str(bare_path), str(temp_dir / "local"))
    _configure_user(local)

    yield SimpleNamespace(bare=bare, collaborator=collaborator, local=local)

    # Cleanup
    for repo in (bare, collaborator, local):
        repo.close()


@pytest.fixture
def output():
    """DisplayService writing to in-memory buffers."""
    out = io.StringIO()
    err = io.StringIO()
    service = DisplayService(
        console=Console(file=out, width=300, highlight=False, color_system=None),
        err_console=Console(file=err, width=300, highlight=False, color_system=None),
    )
    return SimpleNamespace(service=service, out=out, err=err)


@pytest.fixture
def mock_ref_store():
    """Create a mock RefStore with an empty, detached repository."""
    store = Mock(spec=RefStore)
    store.list_remotes.return_value = []
    store.get_config_values.return_value = []
    store.list_local_branches.return_value = []
    store.ref_path_exists.return_value = False
    store.resolve_full_name.return_value = None
    store.resolve_symbolic_ref.return_value = None
    store.current_branch.return_value = None
    return store
