"""
Pig - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Value objects handed to callers are frozen dataclasses so
presentation code can never reach back into the engine's state. The only
mutable structure is MatchState, which is owned by the TurnEngine.
"""

from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Sequence

from src.engine.validators import (
    validate_player_names,
    validate_winning_score,
)


DEFAULT_WINNING_SCORE = 50
DEFAULT_PLAYER_NAMES = ("Player 1", "Player 2")
NUM_PLAYERS = 2


class DiceType(Enum):
    """Type of dice used in the game."""
    D6 = 6


class Difficulty(Enum):
    """Difficulty presets offered by the settings screen."""
    EASY = "easy"      # race to 30
    MEDIUM = "medium"  # race to 50
    HARD = "hard"      # race to 100, sixes count double


class ScoringCategory(Enum):
    """Categories of scoring components for a single roll."""
    FACE_VALUE = auto()
    DOUBLE_SIX = auto()


class ActionStatus(Enum):
    """Outcome of a roll or hold request."""
    OK = "ok"
    GAME_NOT_ACTIVE = "game_not_active"
    NOTHING_TO_HOLD = "nothing_to_hold"


@dataclass(frozen=True)
class ScoringBreakdown:
    """
    A single scoring component within a roll.

    Attributes:
        category: The type of scoring component
        dice_values: The dice that contributed to this score
        points: Points awarded for this component
        description: Human-readable description
    """
    category: ScoringCategory
    dice_values: tuple[int, ...]
    points: int
    description: str


@dataclass(frozen=True)
class ScoringResult:
    """
    Complete scoring result for a dice roll.

    Attributes:
        points: Total points scored
        breakdown: List of individual scoring components
        is_bust: Whether the roll forfeits the turn
    """
    points: int
    breakdown: tuple[ScoringBreakdown, ...]
    is_bust: bool = False

    @property
    def is_doubled(self) -> bool:
        """Returns True if the double-on-six bonus applied."""
        return any(b.category == ScoringCategory.DOUBLE_SIX for b in self.breakdown)

    def __str__(self) -> str:
        if self.is_bust:
            return "BUST! Rolled a 1."
        lines = [f"Total: {self.points} points"]
        for item in self.breakdown:
            lines.append(f"  - {item.description}: {item.points}")
        return "\n".join(lines)


@dataclass(frozen=True)
class DiceRoll:
    """
    Immutable representation of a dice roll.

    Attributes:
        values: Tuple of dice face values
        dice_type: Type of dice
    """
    values: tuple[int, ...]
    dice_type: DiceType = DiceType.D6

    def __post_init__(self) -> None:
        """Validate dice values are within valid range."""
        max_value = self.dice_type.value
        for value in self.values:
            if not (1 <= value <= max_value):
                raise ValueError(
                    f"Invalid die value {value} for {self.dice_type.name}. "
                    f"Must be between 1 and {max_value}."
                )


@dataclass(frozen=True)
class MatchConfig:
    """
    Configuration for a single match.

    Attributes:
        winning_score: Banked total at or above which a player wins
        double_on_six: Whether a rolled 6 adds twice its face value
        player_names: Display names for player 0 and player 1
    """
    winning_score: int = DEFAULT_WINNING_SCORE
    double_on_six: bool = False
    player_names: tuple[str, str] = DEFAULT_PLAYER_NAMES

    def __post_init__(self) -> None:
        """Validate configuration."""
        validate_winning_score(self.winning_score)
        if not isinstance(self.double_on_six, bool):
            raise ValueError(
                f"double_on_six must be a bool, got {type(self.double_on_six).__name__}."
            )
        object.__setattr__(
            self, "player_names", validate_player_names(self.player_names, DEFAULT_PLAYER_NAMES)
        )

    @classmethod
    def for_difficulty(
        cls,
        difficulty: Difficulty | str,
        player_names: Sequence[str] = DEFAULT_PLAYER_NAMES,
    ) -> "MatchConfig":
        """Build the preset configuration for a difficulty level."""
        difficulty = Difficulty(difficulty)
        winning_score, double_on_six = _DIFFICULTY_PRESETS[difficulty]
        return cls(
            winning_score=winning_score,
            double_on_six=double_on_six,
            player_names=tuple(player_names),
        )

    def with_overrides(
        self,
        winning_score: int | None = None,
        double_on_six: bool | None = None,
    ) -> "MatchConfig":
        """Return a copy with any provided fields replaced."""
        changes: dict = {}
        if winning_score is not None:
            changes["winning_score"] = winning_score
        if double_on_six is not None:
            changes["double_on_six"] = double_on_six
        if not changes:
            return self
        return replace(self, **changes)


_DIFFICULTY_PRESETS: dict[Difficulty, tuple[int, bool]] = {
    Difficulty.EASY: (30, False),
    Difficulty.MEDIUM: (50, False),
    Difficulty.HARD: (100, True),
}


@dataclass
class MatchState:
    """
    Live state of a match. Mutated only by TurnEngine.

    Attributes:
        scores: Banked totals, one per player
        pending_score: Points accumulated this turn (not yet banked)
        active_player: Index of the player whose turn it is
        round_number: Incremented every time the turn passes
        rolls_this_turn: Rolls taken since each player's turn began
        is_active: False once a player has won
        winner: Index of the winning player, if any
        last_roll: Face value of the most recent roll
        started_at: Clock reading when the match began
        finished_at: Clock reading when the match was won
    """
    scores: list[int] = field(default_factory=lambda: [0] * NUM_PLAYERS)
    pending_score: int = 0
    active_player: int = 0
    round_number: int = 1
    rolls_this_turn: list[int] = field(default_factory=lambda: [0] * NUM_PLAYERS)
    is_active: bool = True
    winner: int | None = None
    last_roll: int | None = None
    started_at: float = 0.0
    finished_at: float | None = None


@dataclass(frozen=True)
class MatchSnapshot:
    """
    Read-only copy of MatchState plus the config it runs under.

    Attributes:
        scores: Banked totals, one per player
        pending_score: Unbanked points of the active player
        active_player: Index of the player whose turn it is
        round_number: Current round
        rolls_this_turn: Rolls taken since each player's turn began
        is_active: False once the match is finished
        winning_score: Threshold for winning
        double_on_six: Whether sixes count double
        player_names: Display names
        winner: Winning player index, or None
        last_roll: Most recent face value, or None before the first roll
        started_at: Clock reading at match start
        finished_at: Clock reading at match end, or None
    """
    scores: tuple[int, ...]
    pending_score: int
    active_player: int
    round_number: int
    rolls_this_turn: tuple[int, ...]
    is_active: bool
    winning_score: int
    double_on_six: bool
    player_names: tuple[str, ...]
    winner: int | None = None
    last_roll: int | None = None
    started_at: float = 0.0
    finished_at: float | None = None

    @classmethod
    def capture(cls, state: MatchState, config: MatchConfig) -> "MatchSnapshot":
        """Copy the live state so later mutations do not leak through."""
        return cls(
            scores=tuple(state.scores),
            pending_score=state.pending_score,
            active_player=state.active_player,
            round_number=state.round_number,
            rolls_this_turn=tuple(state.rolls_this_turn),
            is_active=state.is_active,
            winning_score=config.winning_score,
            double_on_six=config.double_on_six,
            player_names=tuple(config.player_names),
            winner=state.winner,
            last_roll=state.last_roll,
            started_at=state.started_at,
            finished_at=state.finished_at,
        )

    @property
    def active_player_name(self) -> str:
        return self.player_names[self.active_player]

    @property
    def winner_name(self) -> str | None:
        if self.winner is None:
            return None
        return self.player_names[self.winner]

    def duration(self, now: float | None = None) -> float:
        """Seconds elapsed between start and finish (or ``now`` if still running)."""
        end = self.finished_at if self.finished_at is not None else now
        if end is None:
            return 0.0
        return max(0.0, end - self.started_at)


@dataclass(frozen=True)
class RollResult:
    """
    Outcome of ``TurnEngine.roll_die``.

    Attributes:
        status: OK, or the reason the roll was rejected
        player: Player who rolled (None when rejected)
        value: Face value rolled (None when rejected)
        points: Points the roll added to the pending score
        pending_score: Pending score after the roll
        turn_switched: True when a 1 forfeited the turn
        forfeited: Pending points lost to the forfeit
    """
    status: ActionStatus
    player: int | None = None
    value: int | None = None
    points: int = 0
    pending_score: int = 0
    turn_switched: bool = False
    forfeited: int = 0

    @property
    def accepted(self) -> bool:
        return self.status == ActionStatus.OK


@dataclass(frozen=True)
class HoldResult:
    """
    Outcome of ``TurnEngine.hold``.

    Attributes:
        status: OK, or the reason the hold was rejected
        player: Player who banked (None when rejected)
        banked: Points moved from pending to the player's score
        score: Player's banked total after the hold
        is_win: True when the hold finished the match
    """
    status: ActionStatus
    player: int | None = None
    banked: int = 0
    score: int = 0
    is_win: bool = False

    @property
    def accepted(self) -> bool:
        return self.status == ActionStatus.OK

    @property
    def winner(self) -> int | None:
        return self.player if self.is_win else None
