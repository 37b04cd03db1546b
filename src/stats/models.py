"""
Pig - Statistics Models

Pydantic models for aggregated play statistics.
"""

from datetime import datetime

from pydantic import BaseModel, Field

STATS_VERSION = "3.0.0"


def _face_counts() -> dict[int, int]:
    return {face: 0 for face in range(1, 7)}


class MatchStatistics(BaseModel):
    """Totals accumulated across every finished match."""

    games_played: int = 0
    total_wins: list[int] = Field(default_factory=lambda: [0, 0])
    total_game_time: float = 0.0
    fastest_win: float | None = None
    highest_score: int = 0
    current_win_streak: list[int] = Field(default_factory=lambda: [0, 0])
    longest_win_streak: list[int] = Field(default_factory=lambda: [0, 0])
    dice_roll_counts: dict[int, int] = Field(default_factory=_face_counts)
    total_rolls: int = 0
    rolls_in_finished_games: int = 0
    last_played: datetime | None = None

    model_config = {"validate_assignment": True}

    @property
    def average_game_duration(self) -> float:
        if self.games_played == 0:
            return 0.0
        return self.total_game_time / self.games_played

    @property
    def average_rolls_per_game(self) -> float:
        if self.games_played == 0:
            return 0.0
        return self.rolls_in_finished_games / self.games_played


class StatisticsExport(MatchStatistics):
    """Statistics plus export metadata."""

    export_date: datetime
    version: str = STATS_VERSION
    average_game_duration_seconds: float = 0.0
    average_rolls: float = 0.0
