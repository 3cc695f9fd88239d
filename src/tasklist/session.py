"""TaskListSession - the entry point a UI drives."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from tasklist.config import TaskListConfig
from tasklist.events import Observer
from tasklist.exceptions import PersistenceError
from tasklist.persistence import FilePersistence
from tasklist.store import ItemStore
from tasklist.types import OperationResult

logger = logging.getLogger(__name__)


@dataclass
class TaskListSession:
    """Pairs an ItemStore with its FilePersistence.

    Mutators delegate straight to the store and raise ItemIndexError for
    bad indices. save() and load() never raise for I/O problems; they
    return an OperationResult with a message suitable for display.
    """

    config: TaskListConfig = field(default_factory=TaskListConfig)
    observers: Sequence[Observer] = ()
    store: ItemStore = field(init=False)
    persistence: FilePersistence = field(init=False)

    def __post_init__(self) -> None:
        self.store = ItemStore(observers=self.observers)
        self.persistence = FilePersistence(
            self.config.store_path, encoding=self.config.encoding
        )

    def add(self, raw_text: str | None) -> None:
        self.store.add(raw_text)

    def delete_indices(self, indices: Iterable[int] | None) -> None:
        self.store.delete_indices(indices)

    def toggle(self, indices: Iterable[int] | None) -> None:
        self.store.toggle(indices)

    def clear_completed(self) -> None:
        self.store.clear_completed()

    def labels(self) -> list[str]:
        return [item.label for item in self.store]

    def save(self) -> OperationResult:
        location = self.config.resolved_store_path()
        try:
            self.persistence.save(self.store.snapshot())
        except PersistenceError as exc:
            logger.warning("Save to %s failed: %s", location, exc.__cause__ or exc)
            return OperationResult(
                ok=False, message=f"Save failed: {exc.__cause__ or exc}", error=exc
            )
        return OperationResult(ok=True, message=f"Saved to {location}")

    def load(self) -> OperationResult:
        location = self.config.resolved_store_path()
        try:
            items = self.persistence.load()
        except PersistenceError as exc:
            logger.warning("Load from %s failed: %s", location, exc.__cause__ or exc)
            return OperationResult(
                ok=False, message=f"Load failed: {exc.__cause__ or exc}", error=exc
            )
        self.store.replace(items)
        return OperationResult(ok=True, message=f"Loaded from {location}")
