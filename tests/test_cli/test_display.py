"""Tests for CLI display functions."""

import pytest

from dicemath.cli.display import (
    display_error,
    display_result,
    display_statistics,
    format_value,
)
from dicemath.dice import DiceExpression, Rational


class TestFormatValue:
    """Tests for format_value function."""

    @pytest.mark.parametrize(
        "value,decimal,mixed,expected",
        [
            (Rational(5, 4), False, False, "5/4"),
            (Rational(5, 4), False, True, "1 1/4"),
            (Rational(5, 4), True, False, "1.25"),
            (Rational(-10, 3), True, False, "-3.33333"),
            (Rational(12), True, False, "12"),
            (Rational(0), False, True, "0"),
        ],
    )
    def test_formats(self, value, decimal, mixed, expected):
        """Verify each output style."""
        assert format_value(value, decimal=decimal, mixed=mixed) == expected

    def test_decimal_wins_over_mixed(self):
        """Verify decimal output ignores the mixed switch."""
        assert format_value(Rational(7, 2), decimal=True, mixed=True) == "3.5"


class TestDisplayFunctions:
    """Tests for console output helpers."""

    def test_display_result_plain(self, capsys):
        """Verify a bare result line."""
        display_result("7/2")
        assert capsys.readouterr().out.strip() == "7/2"

    def test_display_result_indexed(self, capsys):
        """Verify the 1-based index prefix."""
        display_result("3", index=4)
        assert capsys.readouterr().out.strip() == "4: 3"

    def test_display_error_goes_to_stderr(self, capsys):
        """Verify errors use stderr and the *** prefix."""
        display_error("Invalid dice: '[x]'")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.strip() == "*** Invalid dice: '[x]'"

    def test_display_statistics(self, capsys):
        """Verify the statistics table lists every statistic."""
        display_statistics(DiceExpression("2d10-2d6+10"))
        out = capsys.readouterr().out
        for label in ("Mean", "Variance", "Std dev", "Min", "Max"):
            assert label in out
        assert "2d10-2d6+10" in out
        assert "4.72582" in out
