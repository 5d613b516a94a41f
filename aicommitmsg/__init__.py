"""Draft Conventional Commits messages with external AI command-line tools."""

__version__ = "1.3.0"
