"""Shared test fixtures for tasklist."""

from __future__ import annotations

from pathlib import Path

import pytest

from tasklist.events import Event
from tasklist.store import ItemStore
from tasklist.types import Item


class RecordingObserver:
    """Test observer that records all events."""

    def __init__(self) -> None:
        self.events: list[Event] = []

    def emit(self, event: Event) -> None:
        self.events.append(event)


@pytest.fixture
def recorder() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def abcd_store(recorder: RecordingObserver) -> ItemStore:
    """Store holding A, B, C, D (none done) with a recorder subscribed."""
    store = ItemStore(items=[Item(text=name) for name in "ABCD"])
    store.subscribe(recorder)
    return store


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "todos.txt"
