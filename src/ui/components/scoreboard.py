"""Scoreboard component — both players, banked and pending scores."""

from __future__ import annotations

import streamlit as st

from src.engine.base import MatchSnapshot


def render_scoreboard(snapshot: MatchSnapshot) -> None:
    """Render the two player panels side by side.

    Args:
        snapshot: Current match snapshot.
    """
    st.markdown(f"#### First to {snapshot.winning_score} wins")
    cols = st.columns(2)

    for idx, col in enumerate(cols):
        is_active = snapshot.is_active and idx == snapshot.active_player
        is_winner = snapshot.winner == idx
        score = snapshot.scores[idx]
        current = snapshot.pending_score if is_active else 0

        with col:
            # Turn indicator
            label = snapshot.player_names[idx]
            if is_winner:
                label = f"🏆 {label}"
            elif is_active:
                label = f"🎲 {label}"

            st.subheader(label)
            st.metric("Score", score, delta=f"+{current}" if current else None)
            st.progress(min(score / snapshot.winning_score, 1.0))
            st.caption(f"Rolls this turn: {snapshot.rolls_this_turn[idx]}")
