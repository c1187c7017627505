"""Exact rational numbers.

Every value is stored as a fully reduced fraction with a positive
denominator, so two equal values always have identical numerator and
denominator. Zero is stored as 0/1.

Rounding is defined on the integer and fractional parts rather than on a
floating point approximation:

- round: half-up (5/2 -> 3, -5/2 -> -2, -5/3 -> -2)
- floor: toward negative infinity
- ceil: toward positive infinity
"""

import math

from dicemath.dice.errors import DivisionByZeroError


class Rational:
    """An immutable exact fraction.

    Attributes:
        numerator: Reduced numerator, carries the sign.
        denominator: Reduced denominator, always positive.

    Examples:
        >>> Rational(15, -20)
        Rational(-3, 4)
        >>> str(Rational(5, 4)), Rational(5, 4).mixed()
        ('5/4', '1 1/4')
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: "int | Rational" = 0, denominator: int = 1) -> None:
        if isinstance(numerator, Rational):
            numerator, denominator = (
                numerator.numerator,
                numerator.denominator * denominator,
            )
        if denominator == 0:
            raise DivisionByZeroError("Division by zero")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        gcd = math.gcd(numerator, denominator)
        self._numerator = numerator // gcd
        self._denominator = denominator // gcd

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    # -------------------------------------------------------------------------
    # Parts and rounding
    # -------------------------------------------------------------------------

    def int_part(self) -> int:
        """Integer part, truncated toward zero."""
        quotient = abs(self._numerator) // self._denominator
        return quotient if self._numerator >= 0 else -quotient

    def frac_part(self) -> "Rational":
        """Remainder after truncation; has the same sign as the value."""
        return Rational(
            self._numerator - self.int_part() * self._denominator, self._denominator
        )

    def sign(self) -> int:
        return (self._numerator > 0) - (self._numerator < 0)

    def abs(self) -> "Rational":
        return Rational(abs(self._numerator), self._denominator)

    def reciprocal(self) -> "Rational":
        """Return 1/value.

        Raises:
            DivisionByZeroError: If the value is zero.
        """
        return Rational(self._denominator, self._numerator)

    def round(self) -> int:
        """Round to the nearest integer, halves going up."""
        result = self.int_part()
        twice_frac = self.frac_part() * 2
        if twice_frac >= 1:
            result += 1
        elif twice_frac < -1:
            result -= 1
        return result

    def floor(self) -> int:
        result = self.int_part()
        if self.frac_part() < 0:
            result -= 1
        return result

    def ceil(self) -> int:
        result = self.int_part()
        if self.frac_part() > 0:
            result += 1
        return result

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def mixed(self) -> str:
        """Render as a mixed number, e.g. "-3 1/3" for -10/3.

        Values with magnitude below one, and whole numbers, render the same
        as str().
        """
        if self._numerator == 0:
            return "0"
        if abs(self._numerator) < self._denominator:
            return str(self)
        text = str(self.int_part())
        frac = self.frac_part()
        if frac:
            text += f" {frac.abs()}"
        return text

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __float__(self) -> float:
        return self._numerator / self._denominator

    def __int__(self) -> int:
        return self.int_part()

    def __trunc__(self) -> int:
        return self.int_part()

    def __floor__(self) -> int:
        return self.floor()

    def __ceil__(self) -> int:
        return self.ceil()

    def __round__(self, ndigits: int | None = None) -> "int | Rational":
        if ndigits is None:
            return self.round()
        if ndigits < 0:
            scale = 10 ** -ndigits
            return Rational((self / scale).round() * scale)
        scale = 10 ** ndigits
        return Rational((self * scale).round()) / scale

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    @staticmethod
    def _coerce(value: object) -> "Rational | None":
        if isinstance(value, Rational):
            return value
        if isinstance(value, int):
            return Rational(value)
        return None

    def __pos__(self) -> "Rational":
        return self

    def __neg__(self) -> "Rational":
        return Rational(-self._numerator, self._denominator)

    def __abs__(self) -> "Rational":
        return self.abs()

    def __add__(self, other: object) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        lcm = math.lcm(self._denominator, rhs._denominator)
        return Rational(
            self._numerator * (lcm // self._denominator)
            + rhs._numerator * (lcm // rhs._denominator),
            lcm,
        )

    __radd__ = __add__

    def __sub__(self, other: object) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self + -rhs

    def __rsub__(self, other: object) -> "Rational":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + -self

    def __mul__(self, other: object) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._numerator, self._denominator * rhs._denominator
        )

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._denominator, self._denominator * rhs._numerator
        )

    def __rtruediv__(self, other: object) -> "Rational":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return (
            self._numerator == rhs._numerator
            and self._denominator == rhs._denominator
        )

    def __hash__(self) -> int:
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        # Denominators are positive, so cross multiplication keeps the order.
        return self._numerator * rhs._denominator < rhs._numerator * self._denominator

    def __le__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return not rhs < self

    def __gt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return rhs < self

    def __ge__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return not self < rhs
