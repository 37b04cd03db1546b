"""
Pig Statistics.

Aggregates play statistics from engine events.
"""

from src.stats.models import MatchStatistics, StatisticsExport
from src.stats.tracker import StatisticsTracker

__all__ = ["MatchStatistics", "StatisticsExport", "StatisticsTracker"]
