"""
Pig - Match History

Append-only log of state-changing actions. Only the most recent
``limit`` entries are kept.
"""

import time
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator

MAX_HISTORY_ENTRIES = 1000


class HistoryKind(Enum):
    """Kinds of recorded actions."""
    ROLL = "roll"
    HOLD = "hold"
    WIN = "win"


@dataclass(frozen=True)
class HistoryEntry:
    """
    A single recorded action.

    Attributes:
        kind: What happened
        player: Index of the acting player
        value: Face rolled, points banked, or final score for a win
        round: Round number when the action happened
        timestamp: Wall-clock seconds since the epoch
    """
    kind: HistoryKind
    player: int
    value: int
    round: int
    timestamp: float


class MatchHistory:
    """Bounded history log owned by a TurnEngine."""

    def __init__(
        self,
        limit: int = MAX_HISTORY_ENTRIES,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if limit <= 0:
            raise ValueError(f"History limit must be positive, got {limit}.")
        self._entries: deque[HistoryEntry] = deque(maxlen=limit)
        self._clock = clock

    @property
    def limit(self) -> int:
        return self._entries.maxlen  # type: ignore[return-value]

    def record(self, kind: HistoryKind, player: int, value: int, round_number: int) -> HistoryEntry:
        """Append an entry, dropping the oldest once the limit is exceeded."""
        entry = HistoryEntry(
            kind=kind,
            player=player,
            value=value,
            round=round_number,
            timestamp=self._clock(),
        )
        self._entries.append(entry)
        return entry

    def clear(self) -> None:
        self._entries.clear()

    def entries(self, kind: HistoryKind | None = None) -> tuple[HistoryEntry, ...]:
        """Return recorded entries, oldest first, optionally filtered by kind."""
        if kind is None:
            return tuple(self._entries)
        return tuple(e for e in self._entries if e.kind == kind)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(tuple(self._entries))
