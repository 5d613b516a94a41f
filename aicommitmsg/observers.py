"""Observer pattern for commit message generation."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .models import ModelCommand


class GenerationObserver(ABC):
    """Abstract base class for generation observers."""

    @abstractmethod
    async def on_command_resolved(self, command: ModelCommand) -> None:
        """Called when the model name has been mapped to a command."""
        pass

    @abstractmethod
    async def on_generation_skipped(self, output_file: Path) -> None:
        """Called when an existing message makes generation unnecessary."""
        pass

    @abstractmethod
    async def on_message_written(self, output_file: Path) -> None:
        """Called when the message has been written to the output file."""
        pass

    @abstractmethod
    async def on_generation_failed(self, error: Exception) -> None:
        """Called when generation fails."""
        pass


class ConsoleLogObserver(GenerationObserver):
    """Observer that reports progress on the (stderr) console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    async def on_command_resolved(self, command: ModelCommand) -> None:
        self.console.print(
            f"[dim]Generating commit message with {escape(command.model)} "
            f"via {escape(command.program)}...[/dim]"
        )

    async def on_generation_skipped(self, output_file: Path) -> None:
        self.console.print(
            "[green][OK][/green] Detected existing Git-generated commit message. "
            "Skipping generation."
        )

    async def on_message_written(self, output_file: Path) -> None:
        self.console.print(
            f"[green][OK][/green] Commit message written to {escape(str(output_file))}"
        )

    async def on_generation_failed(self, error: Exception) -> None:
        # The CLI reports errors itself
        pass


class FileLogObserver(GenerationObserver):
    """Observer that logs generation events to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    async def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a") as f:
            f.write(f"{timestamp} - {message}\n")

    async def on_command_resolved(self, command: ModelCommand) -> None:
        await self._log(
            f"Resolved model {command.model} to {command.provider.value}: {' '.join(command.argv)}"
        )

    async def on_generation_skipped(self, output_file: Path) -> None:
        await self._log(f"Skipped generation, existing message in {output_file}")

    async def on_message_written(self, output_file: Path) -> None:
        await self._log(f"Wrote commit message to {output_file}")

    async def on_generation_failed(self, error: Exception) -> None:
        await self._log(f"Failed to generate commit message: {error}")
