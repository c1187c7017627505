"""Dice system errors."""


class DiceError(ValueError):
    """Base class for dice evaluation errors."""

    pass


class InvalidDiceError(DiceError):
    """Malformed dice pattern or invalid dice counts."""

    pass


class DivisionByZeroError(DiceError, ZeroDivisionError):
    """Zero denominator in a rational value or a dice divisor."""

    pass
