"""Exception types raised by remove_print_cli."""

from __future__ import annotations

from pathlib import Path


class RemovePrintError(Exception):
    """Base class for errors raised by this package."""


class CorruptHistoryError(RemovePrintError):
    """Raised when the history file exists but cannot be used as a history log."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"History file {self.path} is corrupt: {reason}")


__all__ = ["RemovePrintError", "CorruptHistoryError"]
