"""Core functionality for ai-commit-msg."""
from pathlib import Path
from typing import List, Optional, Union

from git import Repo
from rich.console import Console
from rich.markup import escape

from .commit_file import has_existing_message, write_message
from .config import Config
from .context import GitContextBuilder, find_repo_root
from .extraction import MessageExtractor
from .factories import resolve_model_command
from .observers import GenerationObserver
from .prompts import DEFAULT_TEMPLATE, build_prompt
from .runner import AICommandRunner


class CommitMessageGenerator:
    """Drafts a commit message by piping the prompt and git context through an AI CLI."""

    def __init__(
        self,
        repo_path: Union[str, Path],
        config: Optional[Config] = None,
        runner: Optional[AICommandRunner] = None,
        extractor: Optional[MessageExtractor] = None,
        console: Optional[Console] = None,
    ):
        """Initialize the generator for the repository containing repo_path."""
        self.repo_root = find_repo_root(repo_path)
        self.repo = Repo(self.repo_root)
        self.config = config or Config()
        self.context_builder = GitContextBuilder(self.repo, self.config.max_log_entries)
        self.runner = runner or AICommandRunner(timeout=self.config.timeout)
        self.extractor = extractor or MessageExtractor()
        self.console = console or Console(stderr=True)
        self.observers: List[GenerationObserver] = []

    def add_observer(self, observer: GenerationObserver) -> None:
        """Add an observer to be notified of generation events."""
        self.observers.append(observer)

    def remove_observer(self, observer: GenerationObserver) -> None:
        """Remove an observer from the notification list."""
        self.observers.remove(observer)

    def resolve_path(self, path: Union[str, Path]) -> Path:
        """Resolve a path relative to the repository root."""
        path = Path(path)
        return path if path.is_absolute() else self.repo_root / path

    def load_template(self) -> str:
        """Read the prompt template, falling back to the built-in one."""
        template_path = self.resolve_path(self.config.template_path)
        if not template_path.is_file():
            self.console.print(
                f"[yellow]Warning: template {escape(str(template_path))} not found, "
                "using built-in template[/yellow]"
            )
            return DEFAULT_TEMPLATE
        return template_path.read_text(encoding="utf-8")

    def build_prompt(self) -> str:
        """Combine the template with the recent log and staged diff."""
        return build_prompt(self.load_template(), self.context_builder.build())

    async def generate_message(self) -> str:
        """Generate the commit message.

        Returns:
            str: The extracted message

        Raises:
            UnsupportedModelError: If the configured model has no provider
            AIInvocationError: If the AI command fails
            AICommandTimeoutError: If the AI command exceeds the timeout
            MessageNotFoundError: If the output holds no message
        """
        command = resolve_model_command(self.config.model)
        for observer in self.observers:
            await observer.on_command_resolved(command)

        output = await self.runner.run(command, self.build_prompt())
        return self.extractor.extract(output)

    async def prepare(self, output_file: Optional[Union[str, Path]] = None) -> Optional[str]:
        """Generate the message and deliver it, as the prepare-commit-msg hook does.

        When output_file already holds a message (for instance from
        ``git commit -m`` or an earlier run), nothing is generated so the
        existing message is never overwritten.

        Args:
            output_file: File to write, relative to the repository root;
                None to only return the message

        Returns:
            Optional[str]: The generated message, or None if generation was skipped
        """
        target = self.resolve_path(output_file) if output_file is not None else None

        if target is not None and has_existing_message(target):
            for observer in self.observers:
                await observer.on_generation_skipped(target)
            return None

        try:
            message = await self.generate_message()
        except Exception as e:
            for observer in self.observers:
                await observer.on_generation_failed(e)
            raise

        if target is not None:
            write_message(target, message)
            for observer in self.observers:
                await observer.on_message_written(target)

        return message
