"""ItemStore - the authoritative, ordered collection of task items."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence

from tasklist.events import (
    CollectionReplacedEvent,
    CompletedClearedEvent,
    CompositeObserver,
    ItemAddedEvent,
    ItemsDeletedEvent,
    ItemsToggledEvent,
    Observer,
)
from tasklist.exceptions import ItemIndexError
from tasklist.types import Item

logger = logging.getLogger(__name__)


class ItemStore:
    """Ordered task items and the only sanctioned ways to change them.

    The store handles:
    - Validating input before touching the collection
    - Applying each mutation fully or not at all
    - Emitting one change event after each successful mutation

    It does NOT handle:
    - Persistence (see FilePersistence)
    - Rendering (subscribers redraw from the events)
    """

    def __init__(
        self,
        items: Iterable[Item] = (),
        observers: Sequence[Observer] = (),
    ) -> None:
        self._items: list[Item] = list(items)
        self._observer = CompositeObserver(observers)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Item:
        self._check_index(index)
        return self._items[index]

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    @property
    def items(self) -> tuple[Item, ...]:
        return self.snapshot()

    def snapshot(self) -> tuple[Item, ...]:
        """Read-only view of the current items, in order."""
        return tuple(self._items)

    def subscribe(self, observer: Observer) -> None:
        self._observer.add(observer)

    def unsubscribe(self, observer: Observer) -> None:
        self._observer.remove(observer)

    def add(self, raw_text: str | None) -> None:
        """Append a new, not-done item.

        Blank or missing text is ignored without error.
        """
        if raw_text is None:
            return
        text = raw_text.strip()
        if not text:
            return

        self._items.append(Item(text=text))
        index = len(self._items) - 1
        logger.debug("Added item %d: %r", index, text)
        self._observer.emit(ItemAddedEvent(index=index, text=text))

    def delete_indices(self, indices: Iterable[int] | None) -> None:
        """Remove exactly the items at the given indices.

        Args:
            indices: Distinct positions in the current collection, in any order.

        Raises:
            ItemIndexError: If any index is out of range. Nothing is removed.
        """
        targets = self._validated(indices)
        if not targets:
            return

        # Highest first, so earlier removals do not shift pending ones.
        for index in reversed(targets):
            del self._items[index]
        logger.debug("Deleted items %s", targets)
        self._observer.emit(ItemsDeletedEvent(indices=targets))

    def toggle(self, indices: Iterable[int] | None) -> None:
        """Flip the done flag of each given item in place.

        A repeated index is toggled once.

        Raises:
            ItemIndexError: If any index is out of range. Nothing is flipped.
        """
        targets = self._validated(indices)
        if not targets:
            return

        for index in targets:
            item = self._items[index]
            item.done = not item.done
        logger.debug("Toggled items %s", targets)
        self._observer.emit(ItemsToggledEvent(indices=targets))

    def clear_completed(self) -> None:
        """Remove every done item, keeping the others in order."""
        remaining = [item for item in self._items if not item.done]
        removed = len(self._items) - len(remaining)
        self._items = remaining
        logger.debug("Cleared %d completed items", removed)
        self._observer.emit(CompletedClearedEvent(removed_count=removed))

    def replace(self, items: Iterable[Item]) -> None:
        """Install a new collection wholesale."""
        self._items = list(items)
        logger.debug("Replaced collection with %d items", len(self._items))
        self._observer.emit(CollectionReplacedEvent(count=len(self._items)))

    def _validated(self, indices: Iterable[int] | None) -> tuple[int, ...]:
        """Return the distinct indices in ascending order, or raise."""
        if indices is None:
            return ()
        unique = set()
        for index in indices:
            self._check_index(index)
            unique.add(index)
        return tuple(sorted(unique))

    def _check_index(self, index: object) -> None:
        size = len(self._items)
        if isinstance(index, bool) or not isinstance(index, int):
            raise ItemIndexError(
                f"Item index must be an int, got {type(index).__name__}",
                index=index,
                size=size,
            )
        if not 0 <= index < size:
            raise ItemIndexError(
                f"Item index {index} out of range for {size} items",
                index=index,
                size=size,
            )
