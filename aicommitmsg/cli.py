#!/usr/bin/env python3
import asyncio
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import Config
from .context import find_repo_root
from .core import CommitMessageGenerator
from .exceptions import CommitMessageError, MessageNotFoundError
from .extraction import EXPECTED_FORMATS
from .observers import ConsoleLogObserver, FileLogObserver

# stdout carries only the commit message
console = Console(stderr=True)


def run_async(coro):
    """Run a coroutine to completion on a fresh event loop."""
    return asyncio.run(coro)


def require_value(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[str]:
    """Reject options given an empty string."""
    if value is not None and not value.strip():
        raise click.BadParameter("requires an argument")
    return value


class HookCommand(click.Command):
    """Command that exits with status 1 on usage errors, as git hooks expect."""

    def parse_args(self, ctx: click.Context, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


def report_error(error: Exception) -> None:
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    if isinstance(error, MessageNotFoundError):
        console.print(f"Expected format: {escape(EXPECTED_FORMATS)}", soft_wrap=True)
        console.print("Debug output:")
        click.echo(error.raw_output, err=True)


@click.command(
    cls=HookCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument("hook_args", nargs=-1, metavar="[COMMIT_MSG_FILE [SOURCE [SHA]]]")
@click.option(
    "-o",
    "--output",
    callback=require_value,
    metavar="FILE",
    help="Write commit message to FILE instead of stdout",
)
@click.option(
    "--model",
    callback=require_value,
    help="AI model name (default: sonnet). Supported: gpt-*, o1-*, claude-*, haiku, sonnet, opus, copilot/<model>, <provider>/<model>",
)
@click.option(
    "--template",
    callback=require_value,
    metavar="FILE",
    help="Prompt template, relative to the repository root (overrides config setting)",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    help="Seconds to wait for the AI command (overrides config setting)",
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log generation events (overrides config setting)",
)
@click.version_option(__version__, prog_name="ai-commit-msg")
def main(
    hook_args: Tuple[str, ...],
    output: Optional[str],
    model: Optional[str],
    template: Optional[str],
    timeout: Optional[float],
    log_file: Optional[Path],
):
    """
    Generate Conventional Commits format messages by analyzing staged changes
    and recent commit history using AI.

    The message is printed to stdout, or written to FILE with --output. When
    installed as a git prepare-commit-msg hook, the commit message file passed
    by git is used as FILE, and generation is skipped if that file already
    holds a message.

    Configuration can be set in .aicommitmsg.toml in the repository root.
    Command line options override configuration file settings.
    """
    try:
        repo_path = find_repo_root(Path.cwd())
        config = Config.load(repo_path)

        # Command line options override config
        if model is not None:
            config.model = model
        if template is not None:
            config.template_path = template
        if timeout is not None:
            config.timeout = timeout
        if log_file is not None:
            config.log_file = str(log_file)

        if output is None and hook_args:
            output = hook_args[0]

        generator = CommitMessageGenerator(repo_path, config=config)
        generator.add_observer(ConsoleLogObserver(console))

        log_file_path = config.get_log_file(repo_path)
        if log_file_path:
            generator.add_observer(FileLogObserver(str(log_file_path)))

        message = run_async(generator.prepare(output))
        if message is not None and output is None:
            click.echo(message)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        raise click.Abort()
    except CommitMessageError as e:
        report_error(e)
        raise click.Abort()
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort()


if __name__ == "__main__":
    main()
