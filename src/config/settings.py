"""
Pig - Application Settings

Loads configuration from environment variables using Pydantic Settings.
On Streamlit Cloud, bridges st.secrets into env vars so Pydantic can read them.
"""

import os
from functools import lru_cache

from pydantic_settings import BaseSettings

from src.engine.base import Difficulty, MatchConfig

_SECRET_KEYS = (
    "PIG_DIFFICULTY",
    "PIG_WINNING_SCORE",
    "PIG_DOUBLE_ON_SIX",
    "PIG_HISTORY_LIMIT",
    "PIG_DEBUG",
    "PIG_LOG_LEVEL",
)


def _load_streamlit_secrets() -> None:
    """Bridge Streamlit Cloud secrets into environment variables."""
    try:
        import streamlit as st

        for key in _SECRET_KEYS:
            if key not in os.environ and key in st.secrets:
                os.environ[key] = str(st.secrets[key])
    except Exception:
        # No secrets file outside Streamlit Cloud.
        pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Match rules
    difficulty: Difficulty = Difficulty.MEDIUM
    winning_score: int | None = None
    double_on_six: bool | None = None
    history_limit: int = 1000

    # Players
    player_one_name: str = "Player 1"
    player_two_name: str = "Player 2"

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "PIG_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def match_config(self) -> MatchConfig:
        """Resolve the difficulty preset, then apply explicit overrides."""
        preset = MatchConfig.for_difficulty(
            self.difficulty,
            player_names=(self.player_one_name, self.player_two_name),
        )
        return preset.with_overrides(
            winning_score=self.winning_score,
            double_on_six=self.double_on_six,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    _load_streamlit_secrets()
    return Settings()
