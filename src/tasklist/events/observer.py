"""Observer protocol and implementations."""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

from tasklist.events.types import Event

logger = logging.getLogger(__name__)


class Observer(Protocol):
    """Receives store change events with a single emit method."""

    def emit(self, event: Event) -> None: ...


class NullObserver:
    """No-op observer that discards all events."""

    def emit(self, event: Event) -> None:
        pass


class CompositeObserver:
    """Fan out events to multiple observers.

    If a child observer raises, the failure is logged and the remaining
    observers still receive the event.
    """

    def __init__(self, observers: Sequence[Observer] = ()) -> None:
        self._observers = list(observers)

    def __len__(self) -> int:
        return len(self._observers)

    def add(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove(self, observer: Observer) -> None:
        self._observers.remove(observer)

    def emit(self, event: Event) -> None:
        for observer in list(self._observers):
            try:
                observer.emit(event)
            except Exception as exc:
                logger.warning(
                    "Observer %s raised %s handling %s: %s",
                    observer.__class__.__name__,
                    type(exc).__name__,
                    type(event).__name__,
                    exc,
                )
