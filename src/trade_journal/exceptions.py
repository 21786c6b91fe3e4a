"""Trade journal errors and exception types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class JournalError(Exception):
    """Base exception for trade journal errors."""


class JournalFileError(JournalError):
    """A trade history file could not be read or decoded."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path
