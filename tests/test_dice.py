"""
Unit tests for the random source.

Tests the DiceRoller class and DiceResult from chargen/data_models.py.
"""

import pytest
from chargen.data_models import DiceRoller, DiceResult


class TestDiceRoller:
    """Tests for DiceRoller class."""

    def test_singleton_pattern(self):
        """Test that DiceRoller is a singleton."""
        roller1 = DiceRoller()
        roller2 = DiceRoller()
        assert roller1 is roller2

    def test_get_int_from_range(self, seeded_dice):
        """Range draws stay in bounds and are logged."""
        values = [seeded_dice.get_int_from_range(1, 99, "profession") for _ in range(200)]
        assert all(1 <= v <= 99 for v in values)

        log = seeded_dice.get_roll_log()
        assert len(log) == 200
        assert log[0].notation == "1-99"
        assert log[0].reason == "profession"
        assert [entry.total for entry in log] == values

    def test_get_int_from_single_value_range(self, clean_dice):
        assert clean_dice.get_int_from_range(7, 7) == 7

    def test_get_int_from_inverted_range_fails(self, clean_dice):
        with pytest.raises(ValueError):
            clean_dice.get_int_from_range(99, 1)

    def test_seeded_reproducibility(self):
        """Test that seeded rolls are reproducible."""
        DiceRoller.set_seed(12345)
        first_results = [DiceRoller.get_int_from_range(1, 99) for _ in range(5)]

        DiceRoller.set_seed(12345)
        second_results = [DiceRoller.get_int_from_range(1, 99) for _ in range(5)]

        assert first_results == second_results
        DiceRoller.clear_roll_log()

    def test_clear_roll_log(self, clean_dice):
        """Test clearing the roll log."""
        clean_dice.get_int_from_range(1, 6, "test")
        clean_dice.get_int_from_range(1, 99, "test")
        assert len(clean_dice.get_roll_log()) == 2

        clean_dice.clear_roll_log()
        assert len(clean_dice.get_roll_log()) == 0

    def test_roll_log_keeps_only_recent_draws(self, clean_dice):
        """Old entries are dropped once the log is full."""
        limit = DiceRoller.ROLL_LOG_LIMIT
        for i in range(limit + 5):
            clean_dice.get_int_from_range(i, i, "fill")

        log = clean_dice.get_roll_log()
        assert len(log) == limit
        assert log[0].total == 5
        assert log[-1].total == limit + 4

    def test_roll_log_is_a_copy(self, clean_dice):
        clean_dice.get_int_from_range(1, 99)
        clean_dice.get_roll_log().clear()
        assert len(clean_dice.get_roll_log()) == 1


class TestDiceResult:
    """Tests for DiceResult class."""

    def test_str(self):
        """Test string representation."""
        result = DiceResult(notation="1-99", total=42, reason="profession")
        assert str(result) == "1-99: 42"

    def test_timestamp_is_set(self):
        result = DiceResult(notation="1-6", total=3, reason="test")
        assert result.timestamp is not None
