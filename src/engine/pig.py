"""
Pig - Pig Engine

Simple single-die push-your-luck game. Roll a D6: 2-6 adds face value
to turn score, rolling 1 = bust (lose all turn points and the turn).
Hold to bank the turn score. First to the winning score wins.

PigEngine holds the stateless scoring rules. TurnEngine owns the live
match and is the only thing allowed to mutate it.
"""

import logging
import time
from typing import Callable

from src.engine.base import (
    NUM_PLAYERS,
    ActionStatus,
    DiceRoll,
    DiceType,
    HoldResult,
    MatchConfig,
    MatchSnapshot,
    MatchState,
    RollResult,
    ScoringBreakdown,
    ScoringCategory,
    ScoringResult,
)
from src.engine.dice import DieSource, RandomDie
from src.engine.history import MAX_HISTORY_ENTRIES, HistoryEntry, HistoryKind, MatchHistory
from src.events.bus import EventBus
from src.events.types import EngineEvent, EventPayload

logger = logging.getLogger(__name__)

BUST_FACE = 1
DOUBLED_FACE = 6


class PigEngine:
    """
    Stateless engine for the Pig scoring rules.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    NUM_DICE = 1
    DICE_TYPE = DiceType.D6

    @classmethod
    def roll_dice(cls, source: DieSource) -> DiceRoll:
        """Roll a single D6.

        Args:
            source: Die source to draw the face from

        Returns:
            DiceRoll with one value (1-6)
        """
        value = source.next_face()
        return DiceRoll(values=(value,), dice_type=cls.DICE_TYPE)

    @classmethod
    def calculate_score(
        cls,
        dice: DiceRoll | tuple[int, ...],
        double_on_six: bool = False,
    ) -> ScoringResult:
        """Calculate score for a single die roll.

        Rolling 1 = bust (0 points). Rolling 2-6 = face value. With
        ``double_on_six`` a 6 is added a second time, every time it is rolled.

        Args:
            dice: A DiceRoll or tuple of dice values
            double_on_six: Hard-difficulty rule toggle

        Returns:
            ScoringResult with points and bust status
        """
        values = dice.values if isinstance(dice, DiceRoll) else tuple(dice)
        value = values[0]

        if value == BUST_FACE:
            return ScoringResult(points=0, breakdown=(), is_bust=True)

        breakdown = [
            ScoringBreakdown(
                category=ScoringCategory.FACE_VALUE,
                dice_values=(value,),
                points=value,
                description=f"Rolled {value}",
            )
        ]
        if double_on_six and value == DOUBLED_FACE:
            breakdown.append(
                ScoringBreakdown(
                    category=ScoringCategory.DOUBLE_SIX,
                    dice_values=(value,),
                    points=value,
                    description="Double on 6",
                )
            )

        return ScoringResult(
            points=sum(b.points for b in breakdown),
            breakdown=tuple(breakdown),
            is_bust=False,
        )

    @classmethod
    def process_roll(
        cls,
        turn_score: int,
        roll: DiceRoll,
        double_on_six: bool = False,
    ) -> tuple[int, ScoringResult]:
        """Apply a roll to the turn score.

        A bust wipes the turn score; any other face adds its points.

        Args:
            turn_score: Current accumulated turn score
            roll: The roll to apply
            double_on_six: Hard-difficulty rule toggle

        Returns:
            Tuple of (new_turn_score, scoring_result)
        """
        result = cls.calculate_score(roll, double_on_six=double_on_six)
        if result.is_bust:
            return 0, result

        return turn_score + result.points, result


class TurnEngine:
    """
    Stateful two-player Pig match.

    Owns the MatchState and the bounded history, and publishes an
    EventPayload on the bus after each transition. Illegal requests
    (rolling or holding after the match is won, holding with nothing
    pending) are rejected through the result's ``status`` and leave the
    state untouched.

    Args:
        config: Initial match configuration (defaults to race to 50)
        die: Source of face values (defaults to a fair RandomDie)
        bus: Event bus to publish on (a private one is created if omitted)
        clock: Monotonic clock used for match duration
        history_limit: Maximum number of history entries kept
    """

    def __init__(
        self,
        config: MatchConfig | None = None,
        *,
        die: DieSource | None = None,
        bus: EventBus | None = None,
        clock: Callable[[], float] = time.monotonic,
        history_limit: int = MAX_HISTORY_ENTRIES,
    ) -> None:
        self._config = config or MatchConfig()
        self._die = die or RandomDie()
        self.bus = bus or EventBus()
        self._clock = clock
        self._history = MatchHistory(limit=history_limit)
        self._state = MatchState(started_at=clock())

    # --- Queries ---

    @property
    def config(self) -> MatchConfig:
        return self._config

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        return self._history.entries()

    def get_snapshot(self) -> MatchSnapshot:
        """Return an immutable copy of the current match state."""
        return MatchSnapshot.capture(self._state, self._config)

    def can_roll(self) -> bool:
        return self._state.is_active

    def can_hold(self) -> bool:
        return self._state.is_active and self._state.pending_score > 0

    # --- Transitions ---

    def reset(
        self,
        config: MatchConfig | None = None,
        *,
        winning_score: int | None = None,
        double_on_six: bool | None = None,
    ) -> MatchSnapshot:
        """Start a new match, discarding any match in progress.

        Args:
            config: Replacement configuration; the current one is kept if omitted
            winning_score: Override for the winning threshold
            double_on_six: Override for the double-on-six rule

        Returns:
            Snapshot of the fresh match

        Raises:
            ValueError: If an override is invalid
        """
        base = config or self._config
        self._config = base.with_overrides(
            winning_score=winning_score,
            double_on_six=double_on_six,
        )
        self._state = MatchState(started_at=self._clock())
        self._history.clear()

        logger.info(
            "New match: first to %d (double on six: %s)",
            self._config.winning_score,
            self._config.double_on_six,
        )
        return self._publish(EngineEvent.RESET)

    def roll_die(self) -> RollResult:
        """Roll the die for the active player.

        A 1 forfeits the pending score and passes the turn. Any other face
        is added to the pending score (twice for a 6 under double-on-six).

        Returns:
            RollResult describing the outcome
        """
        state = self._state
        if not state.is_active:
            logger.debug("Roll rejected: match is finished")
            return RollResult(
                status=ActionStatus.GAME_NOT_ACTIVE,
                pending_score=state.pending_score,
            )

        # Draw before touching state so a failing source leaves it intact.
        roll = PigEngine.roll_dice(self._die)
        player = state.active_player
        value = roll.values[0]
        new_pending, result = PigEngine.process_roll(
            state.pending_score,
            roll,
            double_on_six=self._config.double_on_six,
        )

        state.last_roll = value
        state.rolls_this_turn[player] += 1
        self._history.record(HistoryKind.ROLL, player, value, state.round_number)

        if result.is_bust:
            forfeited = state.pending_score
            self._switch_player()
            logger.debug("Player %d rolled a 1 and forfeited %d", player, forfeited)
            self._publish(
                EngineEvent.TURN_LOST,
                player=player,
                value=value,
                forfeited=forfeited,
            )
            self._publish(EngineEvent.PLAYER_SWITCHED, player=state.active_player)
            return RollResult(
                status=ActionStatus.OK,
                player=player,
                value=value,
                pending_score=0,
                turn_switched=True,
                forfeited=forfeited,
            )

        state.pending_score = new_pending
        self._publish(
            EngineEvent.ROLL_APPLIED,
            player=player,
            value=value,
            points=result.points,
            doubled=result.is_doubled,
            pending_score=state.pending_score,
        )
        return RollResult(
            status=ActionStatus.OK,
            player=player,
            value=value,
            points=result.points,
            pending_score=state.pending_score,
        )

    def hold(self) -> HoldResult:
        """Bank the pending score for the active player.

        Reaching the winning score finishes the match; otherwise the turn
        passes to the other player.

        Returns:
            HoldResult describing the outcome
        """
        state = self._state
        if not state.is_active:
            logger.debug("Hold rejected: match is finished")
            return HoldResult(status=ActionStatus.GAME_NOT_ACTIVE)
        if state.pending_score <= 0:
            logger.debug("Hold rejected: nothing pending for player %d", state.active_player)
            return HoldResult(
                status=ActionStatus.NOTHING_TO_HOLD,
                score=state.scores[state.active_player],
            )

        player = state.active_player
        banked = state.pending_score
        state.scores[player] += banked
        score = state.scores[player]
        self._history.record(HistoryKind.HOLD, player, banked, state.round_number)

        if score >= self._config.winning_score:
            state.is_active = False
            state.winner = player
            state.finished_at = self._clock()
            self._history.record(HistoryKind.WIN, player, score, state.round_number)
            logger.info("Player %d wins with %d points", player, score)
            self._publish(EngineEvent.HELD, player=player, banked=banked, score=score)
            self._publish(EngineEvent.GAME_WON, player=player, score=score)
            return HoldResult(
                status=ActionStatus.OK,
                player=player,
                banked=banked,
                score=score,
                is_win=True,
            )

        self._switch_player()
        self._publish(EngineEvent.HELD, player=player, banked=banked, score=score)
        self._publish(EngineEvent.PLAYER_SWITCHED, player=state.active_player)
        return HoldResult(
            status=ActionStatus.OK,
            player=player,
            banked=banked,
            score=score,
        )

    # --- Internals ---

    def _switch_player(self) -> None:
        state = self._state
        state.pending_score = 0
        state.rolls_this_turn[state.active_player] = 0
        state.active_player = (state.active_player + 1) % NUM_PLAYERS
        state.round_number += 1

    def _publish(self, event: EngineEvent, **data) -> MatchSnapshot:
        snapshot = self.get_snapshot()
        self.bus.publish(EventPayload(event=event, snapshot=snapshot, data=data))
        return snapshot
