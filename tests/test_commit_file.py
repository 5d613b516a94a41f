"""Tests for the commit message file helpers."""
from aicommitmsg.commit_file import has_existing_message, write_message

def test_comments_and_blank_lines_only(tmp_path):
    """Test that git's comment template counts as no message."""
    path = tmp_path / "COMMIT_EDITMSG"
    path.write_text(
        "\n"
        "# Please enter the commit message for your changes.\n"
        "   # indented comment\n"
        "\n"
        "   \n"
    )
    assert has_existing_message(path) is False

def test_message_present(tmp_path):
    """Test that a real line counts as a message."""
    path = tmp_path / "COMMIT_EDITMSG"
    path.write_text("feat: x\n# comment\n")
    assert has_existing_message(path) is True

def test_missing_file(tmp_path):
    """Test that a missing file counts as no message."""
    assert has_existing_message(tmp_path / "missing") is False

def test_directory(tmp_path):
    """Test that a directory counts as no message."""
    assert has_existing_message(tmp_path) is False

def test_empty_file(tmp_path):
    """Test that an empty file counts as no message."""
    path = tmp_path / "COMMIT_EDITMSG"
    path.write_text("")
    assert has_existing_message(path) is False

def test_hash_inside_line_is_content(tmp_path):
    """Test that only leading hashes mark comments."""
    path = tmp_path / "COMMIT_EDITMSG"
    path.write_text("fix: handle issue #42\n")
    assert has_existing_message(str(path)) is True

def test_write_message_replaces_file(tmp_path):
    """Test that writing overwrites previous contents."""
    path = tmp_path / "COMMIT_EDITMSG"
    path.write_text("# old template\n" * 5)
    
    write_message(path, "feat: new\n\nbody")
    
    assert path.read_text() == "feat: new\n\nbody\n"

def test_write_message_creates_file(tmp_path):
    """Test that writing creates a missing file."""
    path = tmp_path / "msg.txt"
    write_message(path, "chore: x")
    assert path.read_text() == "chore: x\n"
