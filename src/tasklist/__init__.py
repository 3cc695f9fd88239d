"""tasklist: an ordered task list with validated mutations and flat-file persistence."""

from tasklist.config import TaskListConfig, load_config
from tasklist.events import (
    CollectionReplacedEvent,
    CompletedClearedEvent,
    CompositeObserver,
    Event,
    ItemAddedEvent,
    ItemsDeletedEvent,
    ItemsToggledEvent,
    NullObserver,
    Observer,
)
from tasklist.exceptions import (
    ConfigError,
    ItemIndexError,
    PersistenceError,
    TaskListError,
)
from tasklist.persistence import FilePersistence
from tasklist.session import TaskListSession
from tasklist.store import ItemStore
from tasklist.types import Item, OperationResult

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Item",
    "OperationResult",
    "ItemStore",
    "FilePersistence",
    "TaskListSession",
    "TaskListConfig",
    "load_config",
    "Event",
    "ItemAddedEvent",
    "ItemsDeletedEvent",
    "ItemsToggledEvent",
    "CompletedClearedEvent",
    "CollectionReplacedEvent",
    "Observer",
    "NullObserver",
    "CompositeObserver",
    "TaskListError",
    "ItemIndexError",
    "PersistenceError",
    "ConfigError",
]
