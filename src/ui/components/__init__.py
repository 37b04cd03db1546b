"""UI components for Pig."""

from src.ui.components.scoreboard import render_scoreboard
from src.ui.components.turn_controls import render_turn_controls

__all__ = [
    "render_scoreboard",
    "render_turn_controls",
]
