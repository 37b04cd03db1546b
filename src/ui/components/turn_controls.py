"""Turn control buttons — Roll, Hold, New Game."""

from __future__ import annotations

import streamlit as st


def render_turn_controls(
    can_roll: bool,
    can_hold: bool,
    pending_score: int,
    round_number: int,
) -> str | None:
    """Render the action buttons.

    Returns:
        ``"roll"``, ``"hold"``, ``"new"``, or ``None`` if no action taken.
    """
    cols = st.columns(3)

    with cols[0]:
        if st.button(
            "Roll Dice",
            key=f"btn_roll_{round_number}",
            use_container_width=True,
            disabled=not can_roll,
            type="primary",
        ):
            return "roll"

    with cols[1]:
        if st.button(
            f"Hold {pending_score} pts" if pending_score > 0 else "Hold",
            key=f"btn_hold_{round_number}",
            use_container_width=True,
            disabled=not can_hold,
        ):
            return "hold"

    with cols[2]:
        if st.button("New Game", key="btn_new", use_container_width=True):
            return "new"

    return None
