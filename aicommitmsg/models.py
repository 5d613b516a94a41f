"""Shared models for ai-commit-msg."""
from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class ProviderKind(str, Enum):
    CODEX = "codex"
    CLAUDE = "claude"
    COPILOT = "copilot"
    OPENCODE = "opencode"


class ModelCommand(BaseModel):
    """An AI CLI invocation, kept as an argument list and never as a shell string."""

    model_config = ConfigDict(frozen=True)

    provider: ProviderKind
    model: str = Field(description="Model name as passed to the provider CLI")
    argv: Tuple[str, ...] = Field(description="Program followed by its arguments")

    @property
    def program(self) -> str:
        return self.argv[0]
