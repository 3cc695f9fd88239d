"""Exception hierarchy for tasklist."""

from __future__ import annotations

from pathlib import Path


class TaskListError(Exception):
    """Base exception for all tasklist errors."""


class ItemIndexError(TaskListError, IndexError):
    """An index does not refer to a current item."""

    def __init__(self, message: str, index: object, size: int) -> None:
        super().__init__(message)
        self.index = index
        self.size = size


class PersistenceError(TaskListError):
    """The task file could not be read or written."""

    def __init__(self, message: str, path: Path, operation: str) -> None:
        super().__init__(message)
        self.path = path
        self.operation = operation


class ConfigError(TaskListError):
    """Error loading or validating configuration."""
