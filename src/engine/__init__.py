"""
Pig Game Engine.

Pure Python game logic with zero UI/database dependencies.
Handles die rolling, scoring, forfeits, banking, and win detection.
"""

from src.engine.base import (
    ActionStatus,
    DiceRoll,
    DiceType,
    Difficulty,
    HoldResult,
    MatchConfig,
    MatchSnapshot,
    RollResult,
    ScoringBreakdown,
    ScoringResult,
)
from src.engine.dice import DiceExhaustedError, DieSource, RandomDie, ScriptedDie
from src.engine.history import HistoryEntry, HistoryKind, MatchHistory
from src.engine.pig import PigEngine, TurnEngine

__all__ = [
    # Data Classes
    "DiceRoll",
    "HistoryEntry",
    "HoldResult",
    "MatchConfig",
    "MatchSnapshot",
    "RollResult",
    "ScoringBreakdown",
    "ScoringResult",
    # Enums
    "ActionStatus",
    "DiceType",
    "Difficulty",
    "HistoryKind",
    # Die Sources
    "DieSource",
    "DiceExhaustedError",
    "RandomDie",
    "ScriptedDie",
    # Engines
    "MatchHistory",
    "PigEngine",
    "TurnEngine",
]
