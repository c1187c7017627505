"""Dice notation parser.

Splits a pattern such as "3*2d10 - 2d6/4 + d8*6/8 + 10" into signed clauses.
Each clause is either a group of dice or a fixed modifier:

    [+-] [N*|Nx] [count] d [faces] [*N|xN] [/divisor]
    [+-] value [/divisor]

The count defaults to 1, faces to 6, multipliers and divisor to 1. The
first clause may omit its sign. Whitespace is ignored anywhere.
"""

import logging
import re

from dicemath.dice.errors import InvalidDiceError
from dicemath.dice.rational import Rational
from dicemath.dice.types import Clause

logger = logging.getLogger(__name__)


# Characters removed from a pattern before matching
_WHITESPACE = str.maketrans("", "", "\t\n\f\r ")

# One clause, anchored at the current position. The dice alternative is
# tried first, so "+5d" is five d6 rather than the modifier 5.
CLAUSE_PATTERN = re.compile(
    r"""
    (?P<sign>[+-])
    (?:
        (?:(?P<left>\d+)[*x])?
        (?P<count>\d*)
        d
        (?P<faces>\d*)
        (?:[*x](?P<right>\d+))?
    |
        (?P<value>\d+)
    )
    (?:/(?P<divisor>\d+))?
    """,
    re.ASCII | re.IGNORECASE | re.VERBOSE,
)


def _integer(text: str | None, default: int) -> int:
    return int(text) if text else default


def parse_clauses(pattern: str) -> list[Clause]:
    """Parse dice notation into its signed clauses.

    Args:
        pattern: Dice notation string (e.g., "2d6+3", "d20", "-d8/2").

    Returns:
        Clauses in the order they appear. An empty or all-whitespace
        pattern gives an empty list.

    Raises:
        InvalidDiceError: If any part of the pattern is not a valid clause.
        DivisionByZeroError: If a clause has a zero divisor.

    Examples:
        >>> parse_clauses("2d6+3")
        [Clause(factor=Rational(1, 1), count=2, faces=6, is_modifier=False),
         Clause(factor=Rational(3, 1), count=0, faces=0, is_modifier=True)]
    """
    text = pattern.translate(_WHITESPACE)
    if not text:
        return []

    # A leading clause without a sign is positive
    if text[0] not in "+-":
        text = "+" + text

    clauses = []
    pos = 0
    while pos < len(text):
        match = CLAUSE_PATTERN.match(text, pos)
        if not match:
            raise InvalidDiceError(
                f"Invalid dice: {pattern.strip()!r} (cannot parse {text[pos:]!r})"
            )

        sign = -1 if match.group("sign") == "-" else 1
        divisor = _integer(match.group("divisor"), 1)

        if match.group("value") is not None:
            value = int(match.group("value"))
            clause = Clause(factor=Rational(sign * value, divisor), is_modifier=True)
        else:
            left = _integer(match.group("left"), 1)
            right = _integer(match.group("right"), 1)
            clause = Clause(
                factor=Rational(sign * left * right, divisor),
                count=_integer(match.group("count"), 1),
                faces=_integer(match.group("faces"), 6),
            )

        logger.debug("Parsed clause %r as %s", match.group(0), clause)
        clauses.append(clause)
        pos = match.end()

    return clauses
