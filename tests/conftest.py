import sys
import tempfile
from pathlib import Path

import pytest
from git import Repo

from aicommitmsg.models import ModelCommand, ProviderKind

pytest_plugins = ('pytest_asyncio',)

@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep developer settings out of the tests."""
    for name in ['AI_COMMIT_MSG_MODEL', 'AI_COMMIT_MSG_TEMPLATE_PATH', 'AI_COMMIT_MSG_MAX_LOG_ENTRIES',
                 'AI_COMMIT_MSG_TIMEOUT', 'AI_COMMIT_MSG_LOG_FILE']:
        monkeypatch.delenv(name, raising=False)

@pytest.fixture
def temp_git_repo():
    """Create a temporary git repository with one commit and one staged change."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        repo = Repo.init(tmp_dir)
        
        test_file = Path(tmp_dir) / "test.txt"
        test_file.write_text("Initial content\n")
        
        repo.index.add(["test.txt"])
        repo.index.commit("Initial commit")
        
        test_file.write_text("Initial content\nStaged line\n")
        repo.index.add(["test.txt"])
        
        yield Path(tmp_dir)

@pytest.fixture
def empty_git_repo():
    """Create a temporary git repository without any commits."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        Repo.init(tmp_dir)
        yield Path(tmp_dir)

@pytest.fixture
def python_command():
    """Build commands that run a Python snippet in place of an AI CLI."""
    def make(script: str) -> ModelCommand:
        return ModelCommand(
            provider=ProviderKind.OPENCODE,
            model="test/python",
            argv=(sys.executable, "-c", script),
        )
    return make
