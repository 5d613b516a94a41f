"""Factory classes mapping model names to AI command invocations."""
from abc import ABC, abstractmethod
from typing import List

from .exceptions import UnsupportedModelError
from .models import ModelCommand, ProviderKind

DEFAULT_MODEL = "sonnet"

# Claude runs with edits accepted and every MCP server disabled
CLAUDE_SAFETY_FLAGS = (
    "-p",
    "--permission-mode",
    "acceptEdits",
    "--strict-mcp-config",
    "--mcp-config",
    '{"mcpServers":{}}',
)


class CommandFactory(ABC):
    """Abstract factory for building the command line of one AI provider."""

    provider: ProviderKind

    @abstractmethod
    def matches(self, model: str) -> bool:
        """Return True if this provider handles the given model name."""
        pass

    @abstractmethod
    def create_command(self, model: str) -> ModelCommand:
        """Build the invocation for the given model name."""
        pass


class CodexCommandFactory(CommandFactory):
    """Factory for OpenAI models run through the Codex CLI."""

    provider = ProviderKind.CODEX
    prefixes = ("gpt-", "o1-")

    def matches(self, model: str) -> bool:
        return model.startswith(self.prefixes)

    def create_command(self, model: str) -> ModelCommand:
        return ModelCommand(
            provider=self.provider,
            model=model,
            argv=("codex", "exec", "--model", model),
        )


class ClaudeCommandFactory(CommandFactory):
    """Factory for Anthropic models run through the Claude CLI."""

    provider = ProviderKind.CLAUDE
    aliases = frozenset({"haiku", "sonnet", "opus"})

    def matches(self, model: str) -> bool:
        return model.startswith("claude-") or model in self.aliases

    def create_command(self, model: str) -> ModelCommand:
        return ModelCommand(
            provider=self.provider,
            model=model,
            argv=("claude", *CLAUDE_SAFETY_FLAGS, "--model", model),
        )


class CopilotCommandFactory(CommandFactory):
    """Factory for `copilot/<model>` names run through the Copilot CLI."""

    provider = ProviderKind.COPILOT
    prefix = "copilot/"

    def matches(self, model: str) -> bool:
        return model.startswith(self.prefix) and len(model) > len(self.prefix)

    def create_command(self, model: str) -> ModelCommand:
        copilot_model = model[len(self.prefix):]
        return ModelCommand(
            provider=self.provider,
            model=copilot_model,
            argv=("copilot", "--model", copilot_model),
        )


class OpenCodeCommandFactory(CommandFactory):
    """Factory for generic `<provider>/<model>` names run through OpenCode.

    Any name containing a slash is accepted; the provider part is not
    checked against a list of known providers.
    """

    provider = ProviderKind.OPENCODE

    def matches(self, model: str) -> bool:
        return "/" in model and model != CopilotCommandFactory.prefix

    def create_command(self, model: str) -> ModelCommand:
        return ModelCommand(
            provider=self.provider,
            model=model,
            argv=("opencode", "run", "--model", model),
        )


# Order matters: copilot/ names must be claimed before the generic slash rule.
COMMAND_FACTORIES: List[CommandFactory] = [
    CodexCommandFactory(),
    ClaudeCommandFactory(),
    CopilotCommandFactory(),
    OpenCodeCommandFactory(),
]


def get_command_factory(model: str) -> CommandFactory:
    """Get the factory responsible for a model name.

    Raises:
        UnsupportedModelError: If no provider handles the name.
    """
    for factory in COMMAND_FACTORIES:
        if factory.matches(model):
            return factory
    raise UnsupportedModelError(model)


def resolve_model_command(model: str) -> ModelCommand:
    """Resolve a model name to its AI command invocation."""
    return get_command_factory(model).create_command(model)
