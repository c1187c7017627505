"""Core dice rolling engine.

Rolls dice expressions against a random source and provides the output
transforms callers apply to a result (rounding and clamping).

The random source defaults to the `random` module. Pass a seeded
`random.Random` for reproducible rolls.
"""

import logging
import random

from dicemath.dice.expression import DiceExpression
from dicemath.dice.rational import Rational
from dicemath.dice.types import ClampMode, RandomSource, RollResult, RoundingMode

logger = logging.getLogger(__name__)


def roll_dice(
    expression: DiceExpression,
    rng: RandomSource | None = None,
) -> RollResult:
    """Roll dice according to the expression.

    The total matches what `expression.sample(rng)` returns for the same
    draws; this variant also keeps each die face.

    Args:
        expression: The dice expression to roll.
        rng: Random source; defaults to the `random` module.

    Returns:
        RollResult with individual rolls per term and the exact total.

    Examples:
        >>> result = roll_dice(DiceExpression("2d6+3"))
        >>> len(result.individual_rolls)
        2
    """
    source = rng if rng is not None else random
    rolls = []
    total = expression.modifier
    for term in expression.terms:
        faces = term.roll(source)
        rolls.append((term, faces))
        total += term.factor * sum(faces)

    logger.debug("Rolled %s: %s = %s", expression, rolls, total)
    return RollResult(expression=expression, rolls=tuple(rolls), total=total)


def roll(notation: str, rng: RandomSource | None = None) -> RollResult:
    """Parse dice notation and roll.

    Convenience function combining DiceExpression and roll_dice.

    Raises:
        InvalidDiceError: If notation is invalid.
    """
    return roll_dice(DiceExpression(notation), rng)


def roll_many(
    expression: DiceExpression,
    times: int,
    rng: RandomSource | None = None,
) -> list[RollResult]:
    """Roll the same expression several times.

    Raises:
        ValueError: If times is negative.
    """
    if times < 0:
        raise ValueError(f"Number of rolls must be non-negative, got {times}")
    return [roll_dice(expression, rng) for _ in range(times)]


# =============================================================================
# Output transforms
# =============================================================================


def apply_rounding(value: Rational, mode: RoundingMode) -> Rational:
    """Round a result to an integer according to mode."""
    if mode == RoundingMode.ROUND:
        return Rational(value.round())
    if mode == RoundingMode.FLOOR:
        return Rational(value.floor())
    if mode == RoundingMode.CEIL:
        return Rational(value.ceil())
    return value


def apply_clamp(value: Rational, mode: ClampMode) -> Rational:
    """Raise a result to the mode's lower bound if it falls below it."""
    if mode == ClampMode.NON_NEGATIVE and value < 0:
        return Rational(0)
    if mode == ClampMode.POSITIVE and value < 1:
        return Rational(1)
    return value


def transform(
    value: Rational,
    rounding: RoundingMode = RoundingMode.NONE,
    clamp: ClampMode = ClampMode.NONE,
) -> Rational:
    """Apply rounding, then clamping.

    Examples:
        >>> str(transform(Rational(-1, 3), RoundingMode.FLOOR, ClampMode.POSITIVE))
        '1'
    """
    return apply_clamp(apply_rounding(value, rounding), clamp)
