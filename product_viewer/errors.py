"""
Exception types raised by the product viewer.

Loader failures are split into I/O and decode errors so the CLI can report
them before the terminal is touched. Terminal failures are raised only after
the terminal has been restored.
"""

from __future__ import annotations


class ViewerError(Exception):
    """Base class for all product viewer errors."""


class RecordIOError(ViewerError):
    """The data file could not be opened or read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


class RecordDecodeError(ViewerError, ValueError):
    """The data file is not valid JSON or does not match the product schema."""


class TerminalError(ViewerError):
    """The terminal session failed while setting up, drawing or reading input."""
