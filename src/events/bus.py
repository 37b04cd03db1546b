"""
Pig - Event Bus

Synchronous publish/subscribe hub between the TurnEngine and its observers
(presentation, statistics). Callbacks run on the publishing thread in
subscription order.
"""

from __future__ import annotations

import logging
from typing import Callable

from src.events.types import EngineEvent, EventPayload

logger = logging.getLogger(__name__)

Subscriber = Callable[[EventPayload], None]


class EventBus:
    """Dispatches EventPayloads to per-event and catch-all subscribers.

    A subscriber that raises is logged and skipped; the remaining
    subscribers still receive the event.
    """

    def __init__(self) -> None:
        self._subscribers: dict[EngineEvent, list[Subscriber]] = {}
        self._catch_all: list[Subscriber] = []

    def subscribe(self, event: EngineEvent | str, callback: Subscriber) -> None:
        """Register ``callback`` for one event type.

        Args:
            event: EngineEvent or its string value (e.g. ``"turn-lost"``).
            callback: Receives the EventPayload.
        """
        event = EngineEvent(event)
        callbacks = self._subscribers.setdefault(event, [])
        if callback in callbacks:
            logger.warning("Callback already subscribed to %s", event.value)
            return
        callbacks.append(callback)

    def subscribe_all(self, callback: Subscriber) -> None:
        """Register ``callback`` for every event type."""
        if callback in self._catch_all:
            logger.warning("Callback already subscribed to all events")
            return
        self._catch_all.append(callback)

    def unsubscribe(self, callback: Subscriber, event: EngineEvent | str | None = None) -> None:
        """Remove ``callback`` from one event, or from everything when ``event`` is None."""
        if event is not None:
            callbacks = self._subscribers.get(EngineEvent(event), [])
            if callback in callbacks:
                callbacks.remove(callback)
            return

        for callbacks in self._subscribers.values():
            if callback in callbacks:
                callbacks.remove(callback)
        if callback in self._catch_all:
            self._catch_all.remove(callback)

    def publish(self, payload: EventPayload) -> None:
        """Deliver ``payload`` to its subscribers, then to catch-all subscribers."""
        callbacks = list(self._subscribers.get(payload.event, ())) + list(self._catch_all)
        logger.debug("Publishing %s to %d subscribers", payload.event.value, len(callbacks))
        for callback in callbacks:
            try:
                callback(payload)
            except Exception:
                logger.exception("Error in subscriber for %s", payload.event.value)

    def subscriber_count(self, event: EngineEvent | str | None = None) -> int:
        if event is None:
            return sum(len(c) for c in self._subscribers.values()) + len(self._catch_all)
        return len(self._subscribers.get(EngineEvent(event), ()))

    def clear(self) -> None:
        self._subscribers.clear()
        self._catch_all.clear()
