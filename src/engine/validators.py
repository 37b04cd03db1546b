"""
Pig - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Sequence


def validate_die_face(value: int, faces: int = 6) -> int:
    """
    Validate a single die face.

    Args:
        value: Face value to validate
        faces: Number of faces on the die

    Returns:
        Validated face value

    Raises:
        ValueError: If the value is not an integer between 1 and ``faces``
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Die face must be an integer, got {type(value).__name__}.")

    if not (1 <= value <= faces):
        raise ValueError(f"Die face is {value}, must be between 1 and {faces}.")

    return value


def validate_winning_score(score: int) -> int:
    """
    Validate the winning threshold for a match.

    Args:
        score: Winning score to validate

    Returns:
        Validated score

    Raises:
        ValueError: If score is not a positive integer
    """
    if isinstance(score, bool) or not isinstance(score, int):
        raise ValueError(f"Winning score must be an integer, got {type(score).__name__}.")

    if score <= 0:
        raise ValueError(f"Winning score must be positive, got {score}.")

    return score


def validate_player_names(
    names: Sequence[str],
    defaults: Sequence[str],
) -> tuple[str, ...]:
    """
    Normalize display names, falling back to defaults for blank entries.

    Args:
        names: Requested names, one per player
        defaults: Default names, one per player

    Returns:
        Trimmed names as a tuple

    Raises:
        ValueError: If the number of names does not match the number of players
    """
    names = tuple(names)
    if len(names) != len(defaults):
        raise ValueError(f"Expected {len(defaults)} player names, got {len(names)}.")

    cleaned = []
    for name, default in zip(names, defaults):
        name = (name or "").strip() if isinstance(name, str) else ""
        cleaned.append(name or default)
    return tuple(cleaned)
