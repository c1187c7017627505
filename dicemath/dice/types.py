"""Dice system type definitions.

Immutable dataclasses for dice terms, parsed clauses and roll results, plus
the random source protocol and the output transform modes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from dicemath.dice.rational import Rational

if TYPE_CHECKING:
    from dicemath.dice.expression import DiceExpression


@runtime_checkable
class RandomSource(Protocol):
    """Anything that draws uniform integers, such as `random.Random`.

    The `random` module itself satisfies this protocol.
    """

    def randint(self, a: int, b: int) -> int:
        """Return a uniform integer N with a <= N <= b."""
        ...


class RoundingMode(str, Enum):
    """How a rolled result is turned into an integer, if at all."""

    NONE = "none"
    ROUND = "round"
    FLOOR = "floor"
    CEIL = "ceil"


class ClampMode(str, Enum):
    """Lower bound applied to a rolled result."""

    NONE = "none"
    NON_NEGATIVE = "non_negative"  # below 0 reported as 0
    POSITIVE = "positive"  # below 1 reported as 1


@dataclass(frozen=True)
class DiceTerm:
    """A group of identical dice scaled by a factor, like 2d6*3/4.

    Represents `factor * (sum of count dice, each uniform in [1, faces])`.

    Attributes:
        faces: Number of faces on each die.
        count: Number of dice rolled.
        factor: Non-zero multiplier applied to the dice total.
    """

    faces: int
    count: int
    factor: Rational

    @property
    def sort_key(self) -> tuple[int, Rational]:
        """Canonical order: larger dice first, then ascending factor."""
        return (-self.faces, self.factor)

    def roll(self, rng: RandomSource) -> tuple[int, ...]:
        """Roll each die once and return the faces shown."""
        return tuple(rng.randint(1, self.faces) for _ in range(self.count))


@dataclass(frozen=True)
class Clause:
    """One signed clause matched by the parser.

    Attributes:
        factor: Signed factor for dice clauses, or the signed value for
            fixed modifiers. Multipliers and divisor are already applied.
        count: Number of dice (dice clauses only).
        faces: Faces per die (dice clauses only).
        is_modifier: True for a fixed modifier such as "+3" or "-1/2".
    """

    factor: Rational
    count: int = 0
    faces: int = 0
    is_modifier: bool = False


@dataclass(frozen=True)
class RollResult:
    """Result of rolling a dice expression once.

    Attributes:
        expression: The expression that was rolled.
        rolls: Each term paired with the faces its dice showed.
        total: Exact outcome: scaled dice totals plus the modifier.
    """

    expression: "DiceExpression"
    rolls: tuple[tuple[DiceTerm, tuple[int, ...]], ...]
    total: Rational

    @property
    def individual_rolls(self) -> tuple[int, ...]:
        """Every die face in canonical term order."""
        return tuple(face for _, faces in self.rolls for face in faces)

    @property
    def modifier(self) -> Rational:
        return self.expression.modifier
