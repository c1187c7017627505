"""Dice expression system.

Provides exact rational arithmetic, dice notation parsing, statistics and
rolling.

Usage:
    >>> from dicemath.dice import DiceExpression, roll
    >>> expr = DiceExpression("2d10-2d6+10")
    >>> expr.mean(), expr.min(), expr.max()
    (Rational(14, 1), Rational(0, 1), Rational(28, 1))
    >>> result = roll("2d6+3")
"""

# Errors
from dicemath.dice.errors import DiceError, InvalidDiceError, DivisionByZeroError

# Types
from dicemath.dice.rational import Rational
from dicemath.dice.types import (
    Clause,
    ClampMode,
    DiceTerm,
    RandomSource,
    RollResult,
    RoundingMode,
)

# Parser
from dicemath.dice.parser import parse_clauses

# Expressions
from dicemath.dice.expression import (
    DiceExpression,
    d4,
    d6,
    d8,
    d10,
    d12,
    d20,
    d100,
)

# Roller
from dicemath.dice.roller import (
    apply_clamp,
    apply_rounding,
    roll,
    roll_dice,
    roll_many,
    transform,
)

__all__ = [
    # Errors
    "DiceError",
    "InvalidDiceError",
    "DivisionByZeroError",
    # Types
    "Rational",
    "Clause",
    "ClampMode",
    "DiceTerm",
    "RandomSource",
    "RollResult",
    "RoundingMode",
    # Parser
    "parse_clauses",
    # Expressions
    "DiceExpression",
    "d4",
    "d6",
    "d8",
    "d10",
    "d12",
    "d20",
    "d100",
    # Roller
    "roll_dice",
    "roll",
    "roll_many",
    "apply_rounding",
    "apply_clamp",
    "transform",
]
