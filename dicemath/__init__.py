"""dicemath - exact dice expression evaluation for tabletop games."""

from dicemath.dice import DiceExpression, Rational, roll

__version__ = "0.1.0"

__all__ = ["DiceExpression", "Rational", "roll", "__version__"]
