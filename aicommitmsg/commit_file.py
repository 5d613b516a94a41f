"""Reading and writing the commit message file used in hook mode."""
import re
from pathlib import Path
from typing import Union

IGNORED_LINE_PATTERN = re.compile(r"^\s*(#|$)")


def has_existing_message(path: Union[str, Path]) -> bool:
    """Check whether a commit message file already holds a message.

    Comment lines (starting with ``#``, optionally indented) and blank lines
    are ignored, so the template git writes for a fresh commit counts as
    empty.

    Args:
        path: Path to the commit message file

    Returns:
        bool: True if any remaining line has content, False otherwise or if
        the file does not exist
    """
    path = Path(path)
    if not path.is_file():
        return False

    with path.open("r", encoding="utf-8", errors="replace") as f:
        return any(not IGNORED_LINE_PATTERN.match(line) for line in f)


def write_message(path: Union[str, Path], message: str) -> None:
    """Replace the file contents with the commit message."""
    path = Path(path)
    path.unlink(missing_ok=True)
    path.write_text(f"{message}\n", encoding="utf-8")
