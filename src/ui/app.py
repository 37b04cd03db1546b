"""Pig — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

from src.config import configure_logging, get_settings
from src.engine.pig import TurnEngine
from src.stats.tracker import StatisticsTracker
from src.ui.presenter import StatusFeed

_DIE_FACES = {1: "⚀", 2: "⚁", 3: "⚂", 4: "⚃", 5: "⚄", 6: "⚅"}

_RULES = """\
**Goal:** First to the target score wins!

**Turn:**
- Roll the die as many times as you like
- 2-6 adds the face value to your turn score
- **Rolling a 1** loses your turn score and passes the turn
- **Hold** banks your turn score and passes the turn

**Difficulty:**
| Level | Target | Special rule |
|---|---|---|
| Easy | 30 | — |
| Medium | 50 | — |
| Hard | 100 | Every 6 counts double |
"""


def _init_session() -> None:
    """Create the engine and its observers once per browser session."""
    if "engine" in st.session_state:
        return

    settings = get_settings()
    engine = TurnEngine(settings.match_config(), history_limit=settings.history_limit)

    tracker = StatisticsTracker()
    tracker.attach(engine.bus)
    feed = StatusFeed()
    feed.attach(engine.bus)

    engine.reset()
    st.session_state["engine"] = engine
    st.session_state["tracker"] = tracker
    st.session_state["feed"] = feed


def _render_sidebar(tracker: StatisticsTracker) -> None:
    with st.sidebar:
        st.markdown("### Pig Rules")
        st.markdown(_RULES)
        st.divider()

        stats = tracker.stats
        st.markdown("### Statistics")
        st.caption(f"Games played: {stats.games_played}")
        st.caption(f"Wins: {stats.total_wins[0]} – {stats.total_wins[1]}")
        st.caption(f"Highest score: {stats.highest_score}")
        st.download_button(
            "Export statistics",
            data=tracker.export(),
            file_name="pig-game-stats.json",
            mime="application/json",
        )
        if st.button("Clear statistics"):
            tracker.clear()
            st.rerun()


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Pig",
        page_icon="🎲",
        layout="centered",
        initial_sidebar_state="collapsed",
    )
    configure_logging()
    _init_session()

    engine: TurnEngine = st.session_state["engine"]
    tracker: StatisticsTracker = st.session_state["tracker"]
    feed: StatusFeed = st.session_state["feed"]

    from src.ui.components import render_scoreboard, render_turn_controls

    snapshot = engine.get_snapshot()
    render_scoreboard(snapshot)

    if snapshot.last_roll is not None and snapshot.is_active:
        st.markdown(
            f"<div style='font-size:5rem;text-align:center'>{_DIE_FACES[snapshot.last_roll]}</div>",
            unsafe_allow_html=True,
        )

    if feed.latest:
        if snapshot.is_active:
            st.info(feed.latest)
        else:
            st.success(feed.latest)
    st.caption(f"Round {snapshot.round_number}")

    action = render_turn_controls(
        can_roll=engine.can_roll(),
        can_hold=engine.can_hold(),
        pending_score=snapshot.pending_score,
        round_number=snapshot.round_number,
    )
    if action == "roll":
        engine.roll_die()
        st.rerun()
    elif action == "hold":
        engine.hold()
        st.rerun()
    elif action == "new":
        engine.reset()
        st.rerun()

    _render_sidebar(tracker)


if __name__ == "__main__":
    main()
