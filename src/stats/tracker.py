"""
Pig - Statistics Tracker

Observer that turns engine events into running statistics. It reads
event payloads only and never calls back into the engine.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from src.events.bus import EventBus
from src.events.types import EngineEvent, EventPayload
from src.stats.models import MatchStatistics, StatisticsExport

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StatisticsTracker:
    """Aggregates dice counts, wins, streaks and durations.

    Args:
        stats: Existing totals to continue from (fresh totals if omitted)
        now: Wall-clock factory used for ``last_played`` and exports
    """

    def __init__(
        self,
        stats: MatchStatistics | None = None,
        now: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.stats = stats or MatchStatistics()
        self._now = now
        self._rolls_this_game = 0
        self._bus: EventBus | None = None

    def attach(self, bus: EventBus) -> None:
        """Subscribe to the events the tracker cares about."""
        if self._bus is not None:
            self.detach()
        bus.subscribe(EngineEvent.RESET, self.on_reset)
        bus.subscribe(EngineEvent.ROLL_APPLIED, self.on_roll)
        bus.subscribe(EngineEvent.TURN_LOST, self.on_roll)
        bus.subscribe(EngineEvent.HELD, self.on_held)
        bus.subscribe(EngineEvent.GAME_WON, self.on_game_won)
        self._bus = bus

    def detach(self) -> None:
        if self._bus is None:
            return
        for callback in (self.on_reset, self.on_roll, self.on_held, self.on_game_won):
            self._bus.unsubscribe(callback)
        self._bus = None

    # --- Event handlers ---

    def on_reset(self, payload: EventPayload) -> None:
        self._rolls_this_game = 0

    def on_roll(self, payload: EventPayload) -> None:
        value = payload.data["value"]
        self.stats.dice_roll_counts[value] = self.stats.dice_roll_counts.get(value, 0) + 1
        self.stats.total_rolls += 1
        self._rolls_this_game += 1

    def on_held(self, payload: EventPayload) -> None:
        self.stats.highest_score = max(self.stats.highest_score, payload.data["score"])

    def on_game_won(self, payload: EventPayload) -> None:
        winner = payload.data["player"]
        loser = 1 - winner
        duration = payload.snapshot.duration()
        stats = self.stats

        stats.games_played += 1
        stats.total_wins[winner] += 1
        stats.total_game_time += duration
        stats.rolls_in_finished_games += self._rolls_this_game
        stats.last_played = self._now()

        stats.current_win_streak[winner] += 1
        stats.current_win_streak[loser] = 0
        stats.longest_win_streak[winner] = max(
            stats.longest_win_streak[winner],
            stats.current_win_streak[winner],
        )

        if stats.fastest_win is None or duration < stats.fastest_win:
            stats.fastest_win = duration

        logger.info(
            "Recorded win for player %d after %.1fs (%d games played)",
            winner,
            duration,
            stats.games_played,
        )

    # --- Maintenance ---

    def clear(self) -> None:
        """Forget all accumulated statistics."""
        self.stats = MatchStatistics()
        self._rolls_this_game = 0

    def export(self) -> str:
        """Serialize the statistics with export metadata as JSON."""
        export = StatisticsExport(
            **self.stats.model_dump(),
            export_date=self._now(),
            average_game_duration_seconds=self.stats.average_game_duration,
            average_rolls=self.stats.average_rolls_per_game,
        )
        return export.model_dump_json(indent=2)
