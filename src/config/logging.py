"""
Pig - Logging Configuration

Applies the configured log level to the root logger.
"""

import logging

from src.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(settings: Settings | None = None) -> int:
    """Configure root logging from settings.

    ``debug`` forces DEBUG regardless of ``log_level``.

    Returns:
        The numeric level that was applied.

    Raises:
        ValueError: If ``log_level`` is not a known level name
    """
    settings = settings or get_settings()
    level_name = "DEBUG" if settings.debug else settings.log_level.upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {settings.log_level!r}.")

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    return level
