"""Exceptions for flat-file storage."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import Path


class StorageError(Exception):
    """Raised when a backing file cannot be written.

    The in-memory state has already changed when this is raised, so the
    caller should warn the user that the change was not saved.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            path: The file that could not be written.
        """
        self.path = path
        super().__init__(message)
