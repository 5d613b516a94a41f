"""Commit message extraction using Chain of Responsibility pattern.

AI backends format their answers inconsistently, so the message is looked up
in a chain of formats: the commit header/footer markers first, then a fenced
code block.
"""
import re
from abc import ABC, abstractmethod
from typing import List, Optional

from .exceptions import MessageNotFoundError

END_DIFF_MARKER = "===== END DIFF ====="
COMMIT_HEADER_MARKER = "=== commit header ==="
COMMIT_FOOTER_MARKER = "=== commit footer ==="

FENCE_OPEN_PATTERN = re.compile(r"^```(text|yaml)?$")
FENCE_CLOSE = "```"

EXPECTED_FORMATS = (
    f"either '{COMMIT_HEADER_MARKER}' markers or '```text...```' code blocks"
)


def strip_context_echo(output: str) -> str:
    """Drop the echoed git context, up to and including the END DIFF line."""
    lines = output.splitlines()
    for index, line in enumerate(lines):
        if line == END_DIFF_MARKER:
            return "\n".join(lines[index + 1:])
    return output


def _join_block(lines: List[str]) -> Optional[str]:
    message = "\n".join(lines).strip("\n")
    return message if message.strip() else None


class ExtractionHandler(ABC):
    """Abstract base class for extraction handlers."""

    def __init__(self, next_handler: Optional['ExtractionHandler'] = None):
        self.next_handler = next_handler

    def handle(self, text: str) -> Optional[str]:
        """Extract the message, or defer to the next handler if none is found."""
        message = self.extract(text)
        if message is not None or not self.next_handler:
            return message
        return self.next_handler.handle(text)

    @abstractmethod
    def extract(self, text: str) -> Optional[str]:
        """Return the message found in text, or None."""
        pass


class MarkerBlockHandler(ExtractionHandler):
    """Extracts the lines between the commit header and footer markers."""

    def extract(self, text: str) -> Optional[str]:
        lines = text.splitlines()
        start = next(
            (i for i, line in enumerate(lines) if line.startswith(COMMIT_HEADER_MARKER)),
            None,
        )
        if start is None:
            return None
        for end in range(start + 1, len(lines)):
            if lines[end].startswith(COMMIT_FOOTER_MARKER):
                return _join_block(lines[start + 1:end])
        return None


class FencedBlockHandler(ExtractionHandler):
    """Extracts the body of the first plain, text or yaml fenced block."""

    def extract(self, text: str) -> Optional[str]:
        lines = text.splitlines()
        start = next(
            (i for i, line in enumerate(lines) if FENCE_OPEN_PATTERN.match(line)),
            None,
        )
        if start is None:
            return None
        for end in range(start + 1, len(lines)):
            if lines[end] == FENCE_CLOSE:
                return _join_block(lines[start + 1:end])
        return None


def create_extraction_chain() -> ExtractionHandler:
    """Create the default extraction chain."""
    fenced_block = FencedBlockHandler()
    return MarkerBlockHandler(fenced_block)


class MessageExtractor:
    """Extracts the commit message from raw AI output."""

    def __init__(self, chain: Optional[ExtractionHandler] = None):
        self.extraction_chain = chain or create_extraction_chain()

    def extract(self, output: str) -> str:
        """Extract the commit message.

        Raises:
            MessageNotFoundError: If no format yields a non-empty message.
        """
        message = self.extraction_chain.handle(strip_context_echo(output))
        if message is None:
            raise MessageNotFoundError(output)
        return message
