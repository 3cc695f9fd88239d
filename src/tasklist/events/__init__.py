"""Events package for store change notification."""

from tasklist.events.observer import CompositeObserver, NullObserver, Observer
from tasklist.events.types import (
    CollectionReplacedEvent,
    CompletedClearedEvent,
    Event,
    ItemAddedEvent,
    ItemsDeletedEvent,
    ItemsToggledEvent,
)

__all__ = [
    "Event",
    "ItemAddedEvent",
    "ItemsDeletedEvent",
    "ItemsToggledEvent",
    "CompletedClearedEvent",
    "CollectionReplacedEvent",
    "Observer",
    "NullObserver",
    "CompositeObserver",
]
