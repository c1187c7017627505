"""Dice expressions.

A DiceExpression is a linear combination of dice terms plus a constant
modifier, kept in canonical form:

- at most one term per (faces, factor) pair; like terms merge by adding
  their dice counts
- terms sorted by descending faces, then ascending factor
- no term with a zero count, zero faces or zero factor

Expressions are values. Arithmetic returns a new expression and never
changes its operands, so `a += b` either rebinds `a` to a complete result
or raises and leaves `a` as it was.

Usage:
    >>> expr = DiceExpression("3*2d10 - 2d6/4 + d8*6/8 + 10")
    >>> str(expr)
    '2d10*3+d8*3/4-2d6/4+10'
    >>> expr.mean()
    Rational(357, 8)
    >>> str(d6(2) + 5)
    '2d6+5'
"""

import logging
import math
from bisect import bisect_left
from dataclasses import replace
from operator import attrgetter
from typing import Iterable

from dicemath.dice.errors import InvalidDiceError
from dicemath.dice.parser import parse_clauses
from dicemath.dice.rational import Rational
from dicemath.dice.types import DiceTerm, RandomSource

logger = logging.getLogger(__name__)

Scalar = Rational | int


def _scalar(value: object) -> Rational | None:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int):
        return Rational(value)
    return None


class DiceExpression:
    """Canonical sum of scaled dice groups and a rational modifier.

    Args:
        pattern: Optional dice notation to parse. None or an empty pattern
            gives the empty expression, which always evaluates to 0.

    Raises:
        InvalidDiceError: If the pattern is malformed.
        DivisionByZeroError: If the pattern divides by zero.
    """

    __slots__ = ("_terms", "_modifier")

    def __init__(self, pattern: str | None = None) -> None:
        self._terms: list[DiceTerm] = []
        self._modifier = Rational()
        if pattern is None:
            return
        for clause in parse_clauses(pattern):
            if clause.is_modifier:
                self._modifier += clause.factor
            else:
                self._insert(clause.count, clause.faces, clause.factor)
        logger.debug("Parsed %r as %s", pattern, self)

    @classmethod
    def dice(cls, count: int, faces: int = 6, factor: Scalar = 1) -> "DiceExpression":
        """Build `factor * countDfaces` directly.

        Raises:
            InvalidDiceError: If count or faces is negative.
        """
        expression = cls()
        expression._insert(count, faces, Rational(factor))
        return expression

    @classmethod
    def _from_parts(
        cls, terms: Iterable[DiceTerm], modifier: Rational
    ) -> "DiceExpression":
        expression = cls()
        expression._terms = sorted(terms, key=attrgetter("sort_key"))
        expression._modifier = modifier
        return expression

    def _insert(self, count: int, faces: int, factor: Rational) -> None:
        """Add dice to this expression, merging with a matching term.

        Only used on expressions under construction.
        """
        if count < 0 or faces < 0:
            raise InvalidDiceError(f"Invalid dice: {count}d{faces}")
        # Zero dice, zero faces and zero factor contribute nothing
        if count == 0 or faces == 0 or not factor:
            return

        term = DiceTerm(faces=faces, count=count, factor=factor)
        index = bisect_left(self._terms, term.sort_key, key=attrgetter("sort_key"))
        if index < len(self._terms) and self._terms[index].sort_key == term.sort_key:
            existing = self._terms[index]
            self._terms[index] = replace(existing, count=existing.count + count)
        else:
            self._terms.insert(index, term)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def terms(self) -> tuple[DiceTerm, ...]:
        """Dice terms in canonical order."""
        return tuple(self._terms)

    @property
    def modifier(self) -> Rational:
        """Constant part of the expression."""
        return self._modifier

    def __bool__(self) -> bool:
        return bool(self._terms) or bool(self._modifier)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiceExpression):
            return NotImplemented
        return self._terms == other._terms and self._modifier == other._modifier

    def __hash__(self) -> int:
        return hash((tuple(self._terms), self._modifier))

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __pos__(self) -> "DiceExpression":
        return self

    def __neg__(self) -> "DiceExpression":
        return self._from_parts(
            (replace(term, factor=-term.factor) for term in self._terms),
            -self._modifier,
        )

    def __add__(self, other: object) -> "DiceExpression":
        if isinstance(other, DiceExpression):
            result = self._from_parts(self._terms, self._modifier + other._modifier)
            for term in other._terms:
                result._insert(term.count, term.faces, term.factor)
            return result
        value = _scalar(other)
        if value is None:
            return NotImplemented
        return self._from_parts(self._terms, self._modifier + value)

    __radd__ = __add__

    def __sub__(self, other: object) -> "DiceExpression":
        if isinstance(other, DiceExpression):
            result = self._from_parts(self._terms, self._modifier - other._modifier)
            for term in other._terms:
                result._insert(term.count, term.faces, -term.factor)
            return result
        value = _scalar(other)
        if value is None:
            return NotImplemented
        return self._from_parts(self._terms, self._modifier - value)

    def __rsub__(self, other: object) -> "DiceExpression":
        value = _scalar(other)
        if value is None:
            return NotImplemented
        return -self + value

    def __mul__(self, other: object) -> "DiceExpression":
        value = _scalar(other)
        if value is None:
            return NotImplemented
        if not value:
            return DiceExpression()
        # A negative scalar reverses the factor order, so _from_parts re-sorts
        return self._from_parts(
            (replace(term, factor=term.factor * value) for term in self._terms),
            self._modifier * value,
        )

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "DiceExpression":
        value = _scalar(other)
        if value is None:
            return NotImplemented
        return self * value.reciprocal()

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def mean(self) -> Rational:
        """Expected value."""
        total = self._modifier
        for term in self._terms:
            total += Rational(term.count * (term.faces + 1), 2) * term.factor
        return total

    def variance(self) -> Rational:
        """Exact variance; independent of the modifier and factor signs."""
        total = Rational()
        for term in self._terms:
            total += (
                Rational(term.count * (term.faces * term.faces - 1), 12)
                * term.factor
                * term.factor
            )
        return total

    def standard_deviation(self) -> float:
        return math.sqrt(float(self.variance()))

    def min(self) -> Rational:
        """Smallest possible outcome."""
        total = self._modifier
        for term in self._terms:
            if term.factor > 0:
                total += term.factor * term.count
            else:
                total += term.factor * (term.count * term.faces)
        return total

    def max(self) -> Rational:
        """Largest possible outcome."""
        total = self._modifier
        for term in self._terms:
            if term.factor > 0:
                total += term.factor * (term.count * term.faces)
            else:
                total += term.factor * term.count
        return total

    # -------------------------------------------------------------------------
    # Sampling
    # -------------------------------------------------------------------------

    def sample(self, rng: RandomSource) -> Rational:
        """Roll every die once and return the exact outcome.

        Args:
            rng: Source of uniform integers; only its randint() is used.
        """
        total = self._modifier
        for term in self._terms:
            total += term.factor * sum(term.roll(rng))
        return total

    __call__ = sample

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        text = ""
        for term in self._terms:
            text += "-" if term.factor < 0 else "+"
            if term.count > 1:
                text += str(term.count)
            text += f"d{term.faces}"
            numerator = abs(term.factor.numerator)
            if numerator > 1:
                text += f"*{numerator}"
            if term.factor.denominator > 1:
                text += f"/{term.factor.denominator}"
        if self._modifier > 0:
            text += "+"
        if self._modifier:
            text += str(self._modifier)
        if text.startswith("+"):
            text = text[1:]
        return text or "0"

    def __repr__(self) -> str:
        return f"DiceExpression({str(self)!r})"


def d4(count: int = 1) -> DiceExpression:
    return DiceExpression.dice(count, 4)


def d6(count: int = 1) -> DiceExpression:
    return DiceExpression.dice(count, 6)


def d8(count: int = 1) -> DiceExpression:
    return DiceExpression.dice(count, 8)


def d10(count: int = 1) -> DiceExpression:
    return DiceExpression.dice(count, 10)


def d12(count: int = 1) -> DiceExpression:
    return DiceExpression.dice(count, 12)


def d20(count: int = 1) -> DiceExpression:
    return DiceExpression.dice(count, 20)


def d100(count: int = 1) -> DiceExpression:
    return DiceExpression.dice(count, 100)
