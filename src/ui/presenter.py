"""Status feed — turns engine events into status-bar messages."""

from __future__ import annotations

from collections import deque

from src.events.bus import EventBus
from src.events.types import EngineEvent, EventPayload

MAX_MESSAGES = 20


def describe_event(payload: EventPayload) -> str:
    """Human-readable one-liner for an engine event."""
    snapshot = payload.snapshot
    data = payload.data
    names = snapshot.player_names
    event = payload.event

    if event == EngineEvent.RESET:
        return f"New game started! {names[snapshot.active_player]}'s turn."
    if event == EngineEvent.ROLL_APPLIED:
        name = names[data["player"]]
        if data.get("doubled"):
            return f"{name} rolled a 6! Score doubled!"
        return f"{name} rolled a {data['value']}."
    if event == EngineEvent.TURN_LOST:
        return f"{names[data['player']]} rolled a 1! Turn lost!"
    if event == EngineEvent.HELD:
        return f"{names[data['player']]} held {data['banked']} points!"
    if event == EngineEvent.PLAYER_SWITCHED:
        return f"{names[data['player']]}'s turn"
    if event == EngineEvent.GAME_WON:
        return f"{names[data['player']]} wins with {data['score']} points!"
    return event.value


class StatusFeed:
    """Keeps the most recent status messages for the view to render."""

    def __init__(self, max_messages: int = MAX_MESSAGES) -> None:
        self._messages: deque[str] = deque(maxlen=max_messages)

    def attach(self, bus: EventBus) -> None:
        bus.subscribe_all(self.on_event)

    def on_event(self, payload: EventPayload) -> None:
        if payload.event == EngineEvent.RESET:
            self._messages.clear()
        self._messages.append(describe_event(payload))

    @property
    def latest(self) -> str | None:
        return self._messages[-1] if self._messages else None

    @property
    def messages(self) -> list[str]:
        """Messages, newest first."""
        return list(reversed(self._messages))
