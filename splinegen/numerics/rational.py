"""
Exact rational numbers.

Rationals are stored in lowest terms with a positive denominator, so
structural equality is value equality. Python integers are arbitrary
precision, so no arithmetic here can overflow.
"""

from __future__ import annotations

from functools import total_ordering
from math import gcd
from typing import Union

from ..utils.exceptions import ArithmeticOverflowError, DivisionByZeroError

RationalLike = Union["Rational", int]


@total_ordering
class Rational:
    """An immutable, always-reduced fraction."""

    __slots__ = ("n", "d")

    def __init__(self, numerator: int = 0, denominator: int = 1):
        if (not isinstance(numerator, int) or not isinstance(denominator, int)
                or isinstance(numerator, bool) or isinstance(denominator, bool)):
            raise TypeError(
                f"Rational expects integers, got {type(numerator).__name__}/{type(denominator).__name__}"
            )
        if denominator == 0:
            raise DivisionByZeroError(numerator)
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        common = gcd(numerator, denominator)
        object.__setattr__(self, "n", numerator // common)
        object.__setattr__(self, "d", denominator // common)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (Rational, (self.n, self.d))

    @property
    def numerator(self) -> int:
        return self.n

    @property
    def denominator(self) -> int:
        return self.d

    @property
    def is_integer(self) -> bool:
        return self.d == 1

    def reciprocal(self) -> Rational:
        return Rational(self.d, self.n)

    # arithmetic

    def __add__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return Rational(self.n * other.d + other.n * self.d, self.d * other.d)

    __radd__ = __add__

    def __sub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return Rational(self.n * other.d - other.n * self.d, self.d * other.d)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other - self

    def __mul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return Rational(self.n * other.n, self.d * other.d)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        if other.n == 0:
            raise DivisionByZeroError(self.n)
        return Rational(self.n * other.d, self.d * other.n)

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other / self

    def __neg__(self) -> Rational:
        return Rational(-self.n, self.d)

    def __pos__(self) -> Rational:
        return self

    def __abs__(self) -> Rational:
        return Rational(abs(self.n), self.d)

    # comparison

    def __eq__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.n == other.n and self.d == other.d

    def __lt__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.n * other.d < other.n * self.d

    def __hash__(self):
        if self.d == 1:
            return hash(self.n)
        return hash((self.n, self.d))

    def __bool__(self):
        return self.n != 0

    # conversion

    def __float__(self) -> float:
        try:
            return self.n / self.d
        except OverflowError:
            raise ArithmeticOverflowError(str(self)) from None

    def __str__(self):
        if self.d == 1:
            return f"{self.n}"
        return f"{self.n}/{self.d}"

    def __repr__(self):
        return f"Rational({self.n}, {self.d})"


def _coerce(value):
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value)
    return NotImplemented


def as_rational(value: RationalLike) -> Rational:
    """Convert an int or Rational to a Rational, rejecting anything inexact."""
    result = _coerce(value)
    if result is NotImplemented:
        raise TypeError(f"Cannot convert {type(value).__name__} to an exact Rational")
    return result


Rational.ZERO = Rational(0)
Rational.ONE = Rational(1)
