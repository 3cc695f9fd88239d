"""Change events emitted by the item store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class ItemAddedEvent:
    """Fired after an item is appended."""

    index: int
    text: str


@dataclass(frozen=True, slots=True)
class ItemsDeletedEvent:
    """Fired after one or more items are removed by index."""

    indices: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class ItemsToggledEvent:
    """Fired after the done flag of one or more items is flipped."""

    indices: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class CompletedClearedEvent:
    """Fired after clear_completed(), even when nothing was removed."""

    removed_count: int


@dataclass(frozen=True, slots=True)
class CollectionReplacedEvent:
    """Fired after the whole collection is swapped, e.g. on load."""

    count: int


Event = Union[
    ItemAddedEvent,
    ItemsDeletedEvent,
    ItemsToggledEvent,
    CompletedClearedEvent,
    CollectionReplacedEvent,
]
