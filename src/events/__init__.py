"""
Pig Event Notifications.

Event names, payloads, and the synchronous bus observers subscribe to.
"""

from src.events.bus import EventBus
from src.events.types import EngineEvent, EventPayload

__all__ = [
    "EngineEvent",
    "EventBus",
    "EventPayload",
]
