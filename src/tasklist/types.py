"""Core data types for tasklist."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Item:
    """One task: its text and completion flag.

    Items are mutable so that toggling keeps the same object in the same
    position of the collection.
    """

    text: str
    done: bool = False

    @property
    def label(self) -> str:
        """Display form with a checkbox prefix."""
        mark = "[✓]" if self.done else "[ ]"
        return f"{mark} {self.text}"

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Outcome of a save or load, ready to show to the user."""

    ok: bool
    message: str
    error: Exception | None = None
