"""
Pig - Die Source Tests

Tests for RandomDie and ScriptedDie.
"""

import random

import pytest
from src.engine.dice import DiceExhaustedError, RandomDie, ScriptedDie


class TestRandomDie:
    """Tests for RandomDie."""

    def test_value_range(self):
        die = RandomDie()
        for _ in range(200):
            assert 1 <= die.next_face() <= 6

    def test_all_faces_appear(self):
        die = RandomDie(random.Random(7))
        faces = {die.next_face() for _ in range(300)}
        assert faces == {1, 2, 3, 4, 5, 6}

    def test_seeded_rng_is_reproducible(self):
        a = RandomDie(random.Random(42))
        b = RandomDie(random.Random(42))
        assert [a.next_face() for _ in range(20)] == [b.next_face() for _ in range(20)]


class TestScriptedDie:
    """Tests for ScriptedDie."""

    def test_returns_faces_in_order(self):
        die = ScriptedDie([3, 1, 6])
        assert [die.next_face() for _ in range(3)] == [3, 1, 6]

    def test_remaining(self):
        die = ScriptedDie([3, 1])
        die.next_face()
        assert die.remaining == 1

    def test_exhausted_raises(self):
        die = ScriptedDie([2])
        die.next_face()
        with pytest.raises(DiceExhaustedError, match="exhausted after 1 rolls"):
            die.next_face()

    def test_push_extends_script(self):
        die = ScriptedDie([])
        die.push(4, 5)
        assert die.next_face() == 4
        assert die.remaining == 1

    @pytest.mark.parametrize("face", [0, 7])
    def test_invalid_face_rejected(self, face):
        with pytest.raises(ValueError):
            ScriptedDie([face])

    def test_invalid_pushed_face_rejected(self):
        die = ScriptedDie([])
        with pytest.raises(ValueError):
            die.push(9)
