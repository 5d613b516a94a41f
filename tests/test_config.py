"""Tests for configuration functionality."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from aicommitmsg.config import Config


def test_default_config():
    """Test default configuration values."""
    config = Config()
    assert config.model == "sonnet"
    assert config.template_path == ".claude/agents/commit-message-generator.md"
    assert config.max_log_entries == 10
    assert config.timeout == 300.0
    assert config.log_file is None


def test_config_load_nonexistent(tmp_path):
    """Test loading configuration when file doesn't exist."""
    config = Config.load(tmp_path)
    assert config.model == "sonnet"


def test_config_load(tmp_path):
    """Test loading values from the config file."""
    (tmp_path / ".aicommitmsg.toml").write_text(
        'model = "gpt-5"\n'
        'template_path = "prompts/commit.md"\n'
        'max_log_entries = 5\n'
        'timeout = 60\n'
        'log_file = "ai-commit.log"\n'
    )

    config = Config.load(tmp_path)

    assert config.model == "gpt-5"
    assert config.template_path == "prompts/commit.md"
    assert config.max_log_entries == 5
    assert config.timeout == 60.0
    assert config.log_file == "ai-commit.log"


def test_config_load_invalid(tmp_path):
    """Test loading invalid configuration file."""
    (tmp_path / ".aicommitmsg.toml").write_text("invalid [ toml")

    config = Config.load(tmp_path)
    assert config.model == "sonnet"


def test_config_load_invalid_values(tmp_path):
    """Test that out-of-range values fall back to defaults."""
    (tmp_path / ".aicommitmsg.toml").write_text("timeout = -1\n")

    config = Config.load(tmp_path)
    assert config.timeout == 300.0


def test_config_sanitizes_strings(tmp_path):
    """Test that control characters are stripped from string values."""
    (tmp_path / ".aicommitmsg.toml").write_text('model = "  opus\\u0007 "\n')

    config = Config.load(tmp_path)
    assert config.model == "opus"


def test_environment_variables(monkeypatch):
    """Test configuration from environment variables."""
    monkeypatch.setenv("AI_COMMIT_MSG_MODEL", "copilot/gpt-5")
    monkeypatch.setenv("AI_COMMIT_MSG_MAX_LOG_ENTRIES", "3")
    monkeypatch.setenv("AI_COMMIT_MSG_TIMEOUT", "45.5")

    config = Config()

    assert config.model == "copilot/gpt-5"
    assert config.max_log_entries == 3
    assert config.timeout == 45.5


def test_explicit_values_override_environment(monkeypatch):
    """Test that passed values win over environment variables."""
    monkeypatch.setenv("AI_COMMIT_MSG_MODEL", "haiku")

    assert Config(model="opus").model == "opus"


def test_invalid_values_rejected():
    """Test field validation."""
    with pytest.raises(ValidationError):
        Config(max_log_entries=0)
    with pytest.raises(ValidationError):
        Config(timeout=0)


def test_get_log_file_disabled(tmp_path):
    """Test get_log_file when logging is disabled."""
    assert Config().get_log_file(tmp_path) is None


def test_get_log_file_relative(tmp_path):
    """Test that relative log files resolve against the repository root."""
    config = Config(log_file="logs/ai-commit.log")
    assert config.get_log_file(tmp_path) == tmp_path / "logs" / "ai-commit.log"


def test_get_log_file_timestamp(tmp_path):
    """Test the timestamp placeholder."""
    config = Config(log_file="acm_log-{timestamp}.log")
    log_file = config.get_log_file(tmp_path)

    assert log_file.parent == tmp_path
    assert log_file.name.startswith("acm_log-")
    assert "{timestamp}" not in log_file.name
    assert log_file.suffix == ".log"


def test_invalid_environment_value_is_ignored(monkeypatch):
    """Test that a malformed environment value falls back to the default."""
    monkeypatch.setenv("AI_COMMIT_MSG_TIMEOUT", "abc")
    monkeypatch.setenv("AI_COMMIT_MSG_MAX_LOG_ENTRIES", "0")
    monkeypatch.setenv("AI_COMMIT_MSG_MODEL", "opus")

    config = Config()

    assert config.timeout == 300.0
    assert config.max_log_entries == 10
    assert config.model == "opus"


def test_invalid_environment_value_with_config_file(tmp_path, monkeypatch):
    """Test that a malformed environment value does not discard the config file."""
    monkeypatch.setenv("AI_COMMIT_MSG_TIMEOUT", "abc")
    (tmp_path / ".aicommitmsg.toml").write_text('model = "gpt-5"\n')

    config = Config.load(tmp_path)

    assert config.model == "gpt-5"
    assert config.timeout == 300.0


def test_explicit_invalid_value_still_rejected(monkeypatch):
    """Test that only environment values are dropped, not passed values."""
    monkeypatch.setenv("AI_COMMIT_MSG_TIMEOUT", "abc")

    with pytest.raises(ValidationError):
        Config(max_log_entries=0)
