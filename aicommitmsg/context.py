"""Repository context handed to the AI alongside the prompt template."""
from pathlib import Path
from typing import Union

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo

from .exceptions import RepositoryError
from .extraction import END_DIFF_MARKER

LOG_HEADER = "===== GIT LOGS ====="
DIFF_HEADER = "===== GIT DIFF ====="
NO_LOGS = "No logs available."
NO_DIFF = "No diff available."


def find_repo_root(path: Union[str, Path]) -> Path:
    """Return the working tree root of the repository containing path."""
    try:
        repo = Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise RepositoryError(f"Not a git repository: {path}") from e

    if repo.working_tree_dir is None:
        raise RepositoryError(f"Repository has no working tree: {path}")
    return Path(repo.working_tree_dir)


class GitContextBuilder:
    """Builds the recent-log and staged-diff block for the AI."""

    def __init__(self, repo: Repo, max_log_entries: int = 10):
        self.repo = repo
        self.max_log_entries = max_log_entries

    def recent_log(self) -> str:
        try:
            return self.repo.git.log("--oneline", f"-{self.max_log_entries}")
        except GitCommandError:
            # Fresh repositories have no commits yet
            return NO_LOGS

    def staged_diff(self) -> str:
        try:
            return self.repo.git.diff("--cached")
        except GitCommandError:
            return NO_DIFF

    def build(self) -> str:
        """Build the context block.

        Returns:
            str: Log and diff sections, terminated by the END DIFF marker
        """
        lines = ["", LOG_HEADER]
        log = self.recent_log()
        if log:
            lines.append(log)
        lines.extend(["", DIFF_HEADER])
        diff = self.staged_diff()
        if diff:
            lines.append(diff)
        lines.append(END_DIFF_MARKER)
        return "\n".join(lines) + "\n"
