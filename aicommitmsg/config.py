"""Configuration management for ai-commit-msg."""
import os
import re
from datetime import datetime
from pathlib import Path
from typing import Optional

import tomli
from pydantic import BaseModel, Field, ValidationError
from rich.console import Console
from rich.markup import escape

from .factories import DEFAULT_MODEL
from .prompts import DEFAULT_TEMPLATE_PATH
from .runner import DEFAULT_TIMEOUT

DEFAULT_CONFIG_FILENAME = ".aicommitmsg.toml"

console = Console(stderr=True)


class Config(BaseModel):
    """Configuration settings for ai-commit-msg.

    Values can come from ``.aicommitmsg.toml`` in the repository root, from
    ``AI_COMMIT_MSG_*`` environment variables, or from command line options.
    Explicitly passed values take precedence over environment variables.
    """

    model: str = Field(
        default=DEFAULT_MODEL,
        description="AI model used to draft the message (e.g. sonnet, gpt-5, copilot/gpt-5, openrouter/qwen3)"
    )

    template_path: str = Field(
        default=DEFAULT_TEMPLATE_PATH,
        description="Prompt template, relative to the repository root"
    )

    max_log_entries: int = Field(
        default=10,
        gt=0,
        description="Number of recent commits included in the AI context"
    )

    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="Seconds to wait for the AI command"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="File that receives a log of generation events"
    )

    @staticmethod
    def _sanitize_string(value: str) -> str:
        """Strip control characters and surrounding whitespace."""
        if not value:
            return value

        value = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', value)

        if len(value) > 1000:
            value = value[:1000]

        return value.strip()

    @classmethod
    def load(cls, repo_path: Path) -> 'Config':
        """Load configuration from the config file.

        Args:
            repo_path: Path to the repository root

        Returns:
            Config: Configuration object with values from file or defaults
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)

            for key in ['model', 'template_path', 'log_file']:
                if isinstance(config_data.get(key), str):
                    config_data[key] = cls._sanitize_string(config_data[key])

            return cls(**config_data)
        except Exception as e:
            console.print(f"[yellow]Warning: Error reading config file: {e}[/yellow]")
            return cls()

    def get_log_file(self, repo_path: Path) -> Optional[Path]:
        """Get the log file path, resolved against the repository root.

        A ``{timestamp}`` placeholder in the configured name is replaced by
        the current time.
        """
        if not self.log_file:
            return None
        name = self.log_file.replace(
            "{timestamp}", datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        )
        return repo_path / name

    def __init__(self, **data):
        """Initialize config with environment variable support and sanitization."""
        env_data = {}

        env_mapping = {
            'AI_COMMIT_MSG_MODEL': 'model',
            'AI_COMMIT_MSG_TEMPLATE_PATH': 'template_path',
            'AI_COMMIT_MSG_MAX_LOG_ENTRIES': 'max_log_entries',
            'AI_COMMIT_MSG_TIMEOUT': 'timeout',
            'AI_COMMIT_MSG_LOG_FILE': 'log_file',
        }

        for env_var, field_name in env_mapping.items():
            if env_var in os.environ:
                value = os.environ[env_var]

                if field_name in ['model', 'template_path', 'log_file']:
                    value = self._sanitize_string(value)

                env_data[field_name] = value

        merged_data = {**env_data, **data}

        try:
            super().__init__(**merged_data)
        except ValidationError as e:
            # Drop environment values that fail validation and keep the rest
            invalid_env = {
                error["loc"][0] for error in e.errors()
                if error["loc"] and error["loc"][0] in env_data and error["loc"][0] not in data
            }
            if not invalid_env:
                raise
            for env_var, field_name in env_mapping.items():
                if field_name in invalid_env:
                    value = escape(repr(os.environ[env_var]))
                    console.print(
                        f"[yellow]Warning: Ignoring invalid value for {env_var}: {value}[/yellow]"
                    )
            super().__init__(**{k: v for k, v in merged_data.items() if k not in invalid_env})
