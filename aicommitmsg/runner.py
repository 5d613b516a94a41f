"""Execution of AI command-line tools."""
import asyncio
import contextlib
from asyncio.subprocess import PIPE

from .exceptions import AICommandTimeoutError, AIInvocationError
from .models import ModelCommand

DEFAULT_TIMEOUT = 300.0


class AICommandRunner:
    """Pipes a prompt to an AI command and captures its answer.

    The command is started from its argument list, without a shell, so model
    names and prompt text are never re-interpreted.

    Attributes:
        timeout (float): Seconds to wait for the command before killing it
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        self.timeout = timeout

    async def run(self, command: ModelCommand, prompt: str) -> str:
        """Run the command with the prompt on stdin.

        Args:
            command: The resolved AI command
            prompt: Template and git context

        Returns:
            str: The command's standard output

        Raises:
            AIInvocationError: If the command cannot start, exits non-zero,
                or writes output that is not UTF-8
            AICommandTimeoutError: If the command exceeds the timeout
        """
        try:
            process = await asyncio.create_subprocess_exec(
                *command.argv, stdin=PIPE, stdout=PIPE, stderr=PIPE
            )
        except OSError as e:
            raise AIInvocationError(
                f"Failed to start AI command '{command.program}': {e}"
            ) from e

        try:
            # Diffs of non UTF-8 files arrive as surrogate escapes; send the original bytes
            stdin = prompt.encode("utf-8", errors="surrogateescape")
            stdout, stderr = await asyncio.wait_for(
                process.communicate(stdin), timeout=self.timeout
            )
        except asyncio.TimeoutError:
            # The process may exit between the timeout and the kill
            with contextlib.suppress(ProcessLookupError):
                process.kill()
            await process.wait()
            raise AICommandTimeoutError(command.program, self.timeout) from None

        if process.returncode != 0:
            detail = stderr.decode("utf-8", errors="replace").strip()
            message = f"AI command '{command.program}' exited with status {process.returncode}"
            if detail:
                message += f": {detail}"
            raise AIInvocationError(message)

        try:
            return stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise AIInvocationError(
                f"AI command '{command.program}' produced unreadable output: {e}"
            ) from e
