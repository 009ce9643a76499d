"""Fractions of integers that reduce after arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Integral

from strawberry.mathutil import greatest_common_divisor


def _normalised(numerator: int, denominator: int) -> Rational:
    gcd = greatest_common_divisor(numerator, denominator)
    while gcd != 1:
        if gcd == 0:
            raise ZeroDivisionError("cannot normalise 0/0")
        numerator //= gcd
        denominator //= gcd
        gcd = greatest_common_divisor(numerator, denominator)
    return Rational(numerator, denominator)


@dataclass
class Rational:
    """A fraction ``numerator / denominator``.

    Construction keeps the terms as given; results of arithmetic are reduced.
    """

    numerator: int
    denominator: int = 1

    @staticmethod
    def _coerce(other: object) -> Rational | None:
        if isinstance(other, Rational):
            return other
        if isinstance(other, Integral):
            return Rational(int(other))
        return None

    def evaluate(self) -> float:
        """The fraction as a float; a zero denominator gives an infinity or NaN."""
        if self.denominator == 0:
            if self.numerator == 0:
                return math.nan
            return math.copysign(math.inf, self.numerator)
        return self.numerator / self.denominator

    def __float__(self) -> float:
        return self.evaluate()

    def __add__(self, other: Rational | int) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return _normalised(
            self.numerator * rhs.denominator + rhs.numerator * self.denominator,
            self.denominator * rhs.denominator,
        )

    def __sub__(self, other: Rational | int) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return _normalised(
            self.numerator * rhs.denominator - rhs.numerator * self.denominator,
            self.denominator * rhs.denominator,
        )

    def __mul__(self, other: Rational | int) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return _normalised(self.numerator * rhs.numerator, self.denominator * rhs.denominator)

    def __rmul__(self, other: int) -> Rational:
        return self.__mul__(other)

    def __truediv__(self, other: Rational | int) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return _normalised(self.numerator * rhs.denominator, self.denominator * rhs.numerator)