"""
Append-only event logs with publish/subscribe for external observers.
"""

import logging
from typing import Callable, Dict, Generic, Iterator, List, Tuple, TypeVar


logger = logging.getLogger(__name__)

E = TypeVar('E')


class EventLog(Generic[E]):
    """Ordered, append-only record of ledger side effects.

    Events are never mutated, reordered or truncated except by ``_clear()``,
    which only the owning ledger calls on reset.
    """

    def __init__(self, name: str):
        self._name = name
        self._events: List[E] = []
        self._subscribers: Dict[str, Callable[[E], None]] = {}

    @property
    def name(self) -> str:
        return self._name

    def publish(self, event: E) -> None:
        """Append an event and notify subscribers."""
        self._events.append(event)
        logger.debug("Event appended to %s log: %s", self._name, event)

        for subscriber_id, callback in self._subscribers.items():
            try:
                callback(event)
            except Exception:
                logger.exception("Error notifying subscriber %s on %s log", subscriber_id, self._name)

    def subscribe(self, subscriber_id: str, callback: Callable[[E], None]) -> None:
        """Subscribe to events published after this call."""
        self._subscribers[subscriber_id] = callback

    def unsubscribe(self, subscriber_id: str) -> None:
        self._subscribers.pop(subscriber_id, None)

    def replay(self) -> Iterator[E]:
        """Yield every event in insertion order."""
        for event in self._events:
            yield event

    def snapshot(self) -> Tuple[E, ...]:
        """Immutable copy of the log as it stands."""
        return tuple(self._events)

    def _clear(self) -> None:
        self._events = []

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[E]:
        return self.replay()

    def __repr__(self) -> str:
        return f"EventLog(name={self._name!r}, events={len(self._events)})"


class EventLogView(Generic[E]):
    """Observer-facing view of an ``EventLog``: read and subscribe, never write."""

    def __init__(self, log: EventLog[E]):
        self._log = log

    @property
    def name(self) -> str:
        return self._log.name

    def subscribe(self, subscriber_id: str, callback: Callable[[E], None]) -> None:
        self._log.subscribe(subscriber_id, callback)

    def unsubscribe(self, subscriber_id: str) -> None:
        self._log.unsubscribe(subscriber_id)

    def replay(self) -> Iterator[E]:
        return self._log.replay()

    def snapshot(self) -> Tuple[E, ...]:
        return self._log.snapshot()

    def __len__(self) -> int:
        return len(self._log)

    def __iter__(self) -> Iterator[E]:
        return self._log.replay()

    def __repr__(self) -> str:
        return f"EventLogView(name={self.name!r}, events={len(self)})"
