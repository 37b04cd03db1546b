"""
Pig - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import pytest
from typing import Callable

from src.engine.base import MatchConfig
from src.engine.dice import ScriptedDie
from src.engine.pig import TurnEngine
from src.events.bus import EventBus
from src.events.types import EventPayload


# =============================================================================
# CLOCKS
# =============================================================================

class FakeClock:
    """Manually advanced clock for duration assertions."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# =============================================================================
# EVENTS
# =============================================================================

@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def recorded(bus: EventBus) -> list[EventPayload]:
    """Every payload published on ``bus``, in order."""
    payloads: list[EventPayload] = []
    bus.subscribe_all(payloads.append)
    return payloads


# =============================================================================
# ENGINES
# =============================================================================

@pytest.fixture
def make_engine(bus: EventBus, clock: FakeClock) -> Callable[..., TurnEngine]:
    """
    Factory for engines driven by a scripted die.

    Usage: ``make_engine([3, 4, 1], winning_score=20, double_on_six=True)``
    """

    def _make(
        faces: list[int] | tuple[int, ...] = (),
        winning_score: int = 50,
        double_on_six: bool = False,
        **kwargs,
    ) -> TurnEngine:
        config = MatchConfig(winning_score=winning_score, double_on_six=double_on_six)
        return TurnEngine(
            config,
            die=ScriptedDie(faces),
            bus=bus,
            clock=clock,
            **kwargs,
        )

    return _make

