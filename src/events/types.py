"""
Pig - Engine Event Definitions

Event names and payloads published by the TurnEngine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from src.engine.base import MatchSnapshot


class EngineEvent(Enum):
    """Notifications emitted after a state transition."""

    RESET = "reset"
    ROLL_APPLIED = "roll-applied"
    TURN_LOST = "turn-lost"
    HELD = "held"
    PLAYER_SWITCHED = "player-switched"
    GAME_WON = "game-won"


@dataclass(frozen=True)
class EventPayload:
    """Wrapper for engine event data.

    ``snapshot`` is taken after the transition has been fully applied.
    """

    event: EngineEvent
    snapshot: MatchSnapshot
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def player(self) -> int | None:
        """Player the event is about, when the payload names one."""
        return self.data.get("player")
