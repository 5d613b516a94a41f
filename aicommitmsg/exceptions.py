"""Errors raised while drafting a commit message."""


class CommitMessageError(Exception):
    """Base class for every failure that ends a run."""
    pass


class RepositoryError(CommitMessageError):
    """Raised when the working directory is not inside a git repository."""
    pass


class UnsupportedModelError(CommitMessageError):
    """Raised when a model name maps to no known provider."""

    def __init__(self, model: str):
        super().__init__(f"Unsupported model: {model}")
        self.model = model


class AIInvocationError(CommitMessageError):
    """Raised when the AI command cannot be started, fails, or emits unreadable output."""
    pass


class AICommandTimeoutError(CommitMessageError):
    """Raised when the AI command does not finish within the configured timeout."""

    def __init__(self, program: str, timeout: float):
        super().__init__(f"AI command '{program}' timed out after {timeout:g} seconds")
        self.program = program
        self.timeout = timeout


class MessageNotFoundError(CommitMessageError):
    """Raised when no commit message can be extracted from the AI output."""

    def __init__(self, raw_output: str):
        super().__init__("commit message not found in AI output")
        self.raw_output = raw_output
