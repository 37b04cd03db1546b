"""
Pig - Pig Engine Tests

Tests for the stateless PigEngine scoring rules.
"""

import random

import pytest
from src.engine.pig import PigEngine
from src.engine.base import DiceRoll, DiceType, ScoringCategory
from src.engine.dice import RandomDie, ScriptedDie


# === Roll Dice ===


class TestRollDice:
    """Tests for PigEngine.roll_dice()."""

    def test_returns_dice_roll(self):
        roll = PigEngine.roll_dice(RandomDie())
        assert isinstance(roll, DiceRoll)

    def test_single_die(self):
        roll = PigEngine.roll_dice(RandomDie())
        assert len(roll.values) == 1

    def test_dice_type_d6(self):
        roll = PigEngine.roll_dice(RandomDie())
        assert roll.dice_type == DiceType.D6

    def test_value_range(self):
        """Roll 200 times; every value should be 1-6."""
        die = RandomDie(random.Random(7))
        for _ in range(200):
            roll = PigEngine.roll_dice(die)
            assert 1 <= roll.values[0] <= 6

    def test_randomness(self):
        """Rolling many times should produce more than one unique value."""
        die = RandomDie(random.Random(7))
        values = {PigEngine.roll_dice(die).values[0] for _ in range(100)}
        assert len(values) > 1

    def test_uses_injected_source(self):
        source = ScriptedDie([3, 5])
        assert PigEngine.roll_dice(source).values == (3,)
        assert PigEngine.roll_dice(source).values == (5,)

    def test_invalid_face_from_source_raises(self):
        class BrokenDie:
            def next_face(self):
                return 7

        with pytest.raises(ValueError, match="Invalid die value 7"):
            PigEngine.roll_dice(BrokenDie())


# === Calculate Score ===


class TestCalculateScore:
    """Tests for PigEngine.calculate_score()."""

    def test_roll_1_is_bust(self):
        result = PigEngine.calculate_score((1,))
        assert result.is_bust is True
        assert result.points == 0

    def test_roll_1_no_breakdown(self):
        result = PigEngine.calculate_score((1,))
        assert result.breakdown == ()

    @pytest.mark.parametrize("value", [2, 3, 4, 5, 6])
    def test_roll_2_through_6_scores_face_value(self, value):
        result = PigEngine.calculate_score((value,))
        assert result.is_bust is False
        assert result.points == value

    @pytest.mark.parametrize("value", [2, 3, 4, 5, 6])
    def test_breakdown_present(self, value):
        result = PigEngine.calculate_score((value,))
        assert len(result.breakdown) == 1
        assert result.breakdown[0].category == ScoringCategory.FACE_VALUE
        assert result.breakdown[0].points == value

    def test_accepts_dice_roll_object(self):
        roll = DiceRoll(values=(4,), dice_type=DiceType.D6)
        result = PigEngine.calculate_score(roll)
        assert result.points == 4
        assert result.is_bust is False

    def test_bust_with_dice_roll_object(self):
        roll = DiceRoll(values=(1,), dice_type=DiceType.D6)
        result = PigEngine.calculate_score(roll)
        assert result.is_bust is True

    def test_str_for_bust(self):
        assert "BUST" in str(PigEngine.calculate_score((1,)))


class TestDoubleOnSix:
    """Tests for the hard-difficulty double-on-six rule."""

    def test_six_doubles_when_enabled(self):
        result = PigEngine.calculate_score((6,), double_on_six=True)
        assert result.points == 12
        assert result.is_doubled is True

    def test_six_not_doubled_by_default(self):
        result = PigEngine.calculate_score((6,))
        assert result.points == 6
        assert result.is_doubled is False

    def test_breakdown_lists_bonus(self):
        result = PigEngine.calculate_score((6,), double_on_six=True)
        categories = [b.category for b in result.breakdown]
        assert categories == [ScoringCategory.FACE_VALUE, ScoringCategory.DOUBLE_SIX]

    @pytest.mark.parametrize("value", [2, 3, 4, 5])
    def test_other_faces_unaffected(self, value):
        result = PigEngine.calculate_score((value,), double_on_six=True)
        assert result.points == value
        assert result.is_doubled is False

    def test_one_still_busts(self):
        result = PigEngine.calculate_score((1,), double_on_six=True)
        assert result.is_bust is True
        assert result.points == 0


# === Process Roll ===


class TestProcessRoll:
    """Tests for PigEngine.process_roll()."""

    def test_accumulates_turn_score(self):
        new_score, result = PigEngine.process_roll(10, DiceRoll(values=(4,)))
        assert new_score == 14
        assert result.points == 4
        assert result.is_bust is False

    def test_bust_resets_to_zero(self):
        new_score, result = PigEngine.process_roll(50, DiceRoll(values=(1,)))
        assert new_score == 0
        assert result.is_bust is True

    def test_doubled_six(self):
        new_score, result = PigEngine.process_roll(
            3, DiceRoll(values=(6,)), double_on_six=True
        )
        assert new_score == 15
        assert result.is_doubled is True

    def test_each_six_doubled_independently(self):
        score = 0
        for value in [6, 2, 6]:
            score, _ = PigEngine.process_roll(
                score, DiceRoll(values=(value,)), double_on_six=True
            )
        assert score == 26  # 12 + 2 + 12

    def test_random_non_bust_sequences_sum(self):
        """Turn score equals the running sum for any run without a 1."""
        rng = random.Random(1234)
        for _ in range(50):
            faces = [rng.randint(2, 6) for _ in range(rng.randint(1, 15))]
            double = rng.random() < 0.5
            score = 0
            for value in faces:
                score, _ = PigEngine.process_roll(
                    score, DiceRoll(values=(value,)), double_on_six=double
                )
            expected = sum(v * 2 if double and v == 6 else v for v in faces)
            assert score == expected
