"""Tests for dice system types."""

import random
from dataclasses import FrozenInstanceError

import pytest

from dicemath.dice.expression import DiceExpression
from dicemath.dice.rational import Rational
from dicemath.dice.types import (
    ClampMode,
    DiceTerm,
    RandomSource,
    RollResult,
    RoundingMode,
)


class TestDiceTerm:
    """Tests for DiceTerm dataclass."""

    def test_create_term(self):
        """Test creating a term."""
        term = DiceTerm(faces=6, count=2, factor=Rational(3, 4))
        assert term.faces == 6
        assert term.count == 2
        assert term.factor == Rational(3, 4)

    def test_term_is_immutable(self):
        """Test that DiceTerm is frozen."""
        term = DiceTerm(faces=6, count=2, factor=Rational(1))
        with pytest.raises(FrozenInstanceError):
            term.count = 3

    def test_sort_key_orders_faces_descending(self):
        """Test that bigger dice sort first, then smaller factors."""
        terms = [
            DiceTerm(faces=6, count=1, factor=Rational(2)),
            DiceTerm(faces=20, count=1, factor=Rational(1)),
            DiceTerm(faces=6, count=1, factor=Rational(-1, 2)),
        ]
        ordered = sorted(terms, key=lambda t: t.sort_key)
        assert [(t.faces, t.factor) for t in ordered] == [
            (20, Rational(1)),
            (6, Rational(-1, 2)),
            (6, Rational(2)),
        ]

    def test_roll_draws_count_dice(self):
        """Test that roll returns one face per die, in range."""
        term = DiceTerm(faces=4, count=8, factor=Rational(1))
        faces = term.roll(random.Random(3))
        assert len(faces) == 8
        assert all(1 <= face <= 4 for face in faces)


class TestRollResult:
    """Tests for RollResult dataclass."""

    def test_individual_rolls_flattened(self):
        """Test that individual_rolls lists every die in term order."""
        expr = DiceExpression("2d6+d8+1")
        d8_term, d6_term = expr.terms
        result = RollResult(
            expression=expr,
            rolls=((d8_term, (8,)), (d6_term, (1, 2))),
            total=Rational(12),
        )
        assert result.individual_rolls == (8, 1, 2)
        assert result.modifier == 1

    def test_result_is_immutable(self):
        """Test that RollResult is frozen."""
        result = RollResult(expression=DiceExpression("3"), rolls=(), total=Rational(3))
        with pytest.raises(FrozenInstanceError):
            result.total = Rational(4)


class TestRandomSource:
    """Tests for the RandomSource protocol."""

    def test_random_module_and_instances_qualify(self):
        """Test that the usual random sources satisfy the protocol."""
        assert isinstance(random, RandomSource)
        assert isinstance(random.Random(), RandomSource)
        assert isinstance(random.SystemRandom(), RandomSource)

    def test_object_without_randint_does_not(self):
        """Test that a plain object is rejected."""
        assert not isinstance(object(), RandomSource)


class TestModes:
    """Tests for the output mode enums."""

    def test_rounding_values(self):
        """Test rounding mode string values."""
        assert RoundingMode("floor") is RoundingMode.FLOOR
        assert RoundingMode.NONE.value == "none"

    def test_clamp_values(self):
        """Test clamp mode string values."""
        assert ClampMode("positive") is ClampMode.POSITIVE
        assert ClampMode.NON_NEGATIVE.value == "non_negative"
