"""
Pig - Die Sources

The engine never calls the random module directly; it asks an injected
source for the next face. RandomDie is used in play, ScriptedDie replays a
fixed sequence for tests and demos.
"""

import random
from typing import Iterable, Protocol

from src.engine.validators import validate_die_face


class DiceExhaustedError(RuntimeError):
    """Raised when a ScriptedDie has no faces left."""


class DieSource(Protocol):
    """Anything that can produce a uniformly distributed face in [1, 6]."""

    def next_face(self) -> int:
        ...


class RandomDie:
    """Fair six-sided die backed by ``random.Random``."""

    FACES = 6

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def next_face(self) -> int:
        return self._rng.randint(1, self.FACES)


class ScriptedDie:
    """Die that returns a predetermined sequence of faces.

    Args:
        faces: Face values to return in order.

    Raises:
        ValueError: If any face is outside [1, 6].
    """

    def __init__(self, faces: Iterable[int]) -> None:
        self._faces = [validate_die_face(face) for face in faces]
        self._position = 0

    @property
    def remaining(self) -> int:
        return len(self._faces) - self._position

    def push(self, *faces: int) -> None:
        """Append more faces to the end of the script."""
        self._faces.extend(validate_die_face(face) for face in faces)

    def next_face(self) -> int:
        if self._position >= len(self._faces):
            raise DiceExhaustedError(
                f"Scripted die exhausted after {len(self._faces)} rolls."
            )
        face = self._faces[self._position]
        self._position += 1
        return face
