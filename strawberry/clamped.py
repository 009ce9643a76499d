"""Numbers held within fixed bounds."""

from __future__ import annotations

from functools import total_ordering
from numbers import Integral, Real
from typing import Any


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@total_ordering
class Clamped:
    """A number that is clamped into ``[minimum, maximum]`` after every operation."""

    __slots__ = ("_minimum", "_maximum", "_value")

    def __init__(self, minimum: Any, maximum: Any, value: Any = 0) -> None:
        if minimum > maximum:
            raise ValueError(f"minimum {minimum!r} is greater than maximum {maximum!r}")
        self._minimum = minimum
        self._maximum = maximum
        self._value = self._clamp(value)

    def _clamp(self, value: Any) -> Any:
        if value < self._minimum:
            return self._minimum
        if self._maximum < value:
            return self._maximum
        return value

    def _with_value(self, value: Any) -> Clamped:
        result = object.__new__(type(self))
        result._minimum = self._minimum
        result._maximum = self._maximum
        result._value = result._clamp(value)
        return result

    @staticmethod
    def _operand(other: object) -> Any:
        if isinstance(other, Clamped):
            return other._value
        if isinstance(other, Real):
            return other
        return None

    @property
    def minimum(self) -> Any:
        """Lower bound."""
        return self._minimum

    @property
    def maximum(self) -> Any:
        """Upper bound."""
        return self._maximum

    @property
    def value(self) -> Any:
        """The clamped value."""
        return self._value

    def __float__(self) -> float:
        return float(self._value)

    def __int__(self) -> int:
        return int(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._minimum!r}, {self._maximum!r}, {self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Clamped):
            return (self._minimum, self._maximum, self._value) == (
                other._minimum,
                other._maximum,
                other._value,
            )
        if isinstance(other, Real):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Clamped):
            return (self._minimum, self._maximum, self._value) < (
                other._minimum,
                other._maximum,
                other._value,
            )
        if isinstance(other, Real):
            return self._value < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __add__(self, other: Clamped | float) -> Clamped:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._with_value(self._value + operand)

    def __sub__(self, other: Clamped | float) -> Clamped:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._with_value(self._value - operand)

    def __mul__(self, other: Clamped | float) -> Clamped:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._with_value(self._value * operand)

    def __truediv__(self, other: Clamped | float) -> Clamped:
        """Divide; integer values divide with truncation toward zero."""
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        if isinstance(self._value, Integral) and isinstance(operand, Integral):
            return self._with_value(_trunc_div(int(self._value), int(operand)))
        return self._with_value(self._value / operand)


def static_clamped(minimum: Any, maximum: Any) -> type[Clamped]:
    """Make a ``Clamped`` subclass whose bounds are fixed to ``minimum`` and ``maximum``."""
    if minimum > maximum:
        raise ValueError(f"minimum {minimum!r} is greater than maximum {maximum!r}")

    class StaticClamped(Clamped):
        __slots__ = ()

        def __init__(self, value: Any = 0) -> None:
            super().__init__(minimum, maximum, value)

    return StaticClamped