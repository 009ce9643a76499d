"""Numbers that wrap around modulo a maximum."""

from __future__ import annotations

import math
from functools import total_ordering
from numbers import Integral, Real


def _check_maximum(maximum: float) -> None:
    if maximum <= 0:
        raise ValueError(f"maximum must be positive, got {maximum!r}")


@total_ordering
class Periodic:
    """An integer kept in ``[0, maximum)``.

    Arithmetic wraps around ``maximum``. Comparisons look at the value only,
    so periodics with different maxima compare equal when their values match.
    """

    __slots__ = ("_maximum", "_value")

    def __init__(self, maximum: int, value: int = 0) -> None:
        _check_maximum(maximum)
        self._maximum = int(maximum)
        self._value = int(value) % self._maximum

    @property
    def maximum(self) -> int:
        """The modulus."""
        return self._maximum

    @property
    def value(self) -> int:
        """The current value, always in ``[0, maximum)``."""
        return self._value

    def set_max(self, maximum: int) -> None:
        """Change the modulus, reducing the value into the new range."""
        _check_maximum(maximum)
        self._maximum = int(maximum)
        self._value %= self._maximum

    def _operand(self, other: object) -> int | None:
        if isinstance(other, Periodic):
            return other._value
        if isinstance(other, Integral):
            return int(other)
        return None

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"Periodic({self._maximum}, {self._value})"

    def __eq__(self, other: object) -> bool:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._value == operand

    def __lt__(self, other: object) -> bool:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._value < operand

    def __hash__(self) -> int:
        return hash(self._value)

    def __neg__(self) -> Periodic:
        return Periodic(self._maximum, -self._value)

    def __add__(self, other: Periodic | int) -> Periodic:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return Periodic(self._maximum, self._value + operand)

    def __sub__(self, other: Periodic | int) -> Periodic:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return Periodic(self._maximum, self._value - operand)

    def __mul__(self, other: Periodic | int) -> Periodic:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return Periodic(self._maximum, self._value * operand)

    def __floordiv__(self, other: Periodic | int) -> Periodic:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return Periodic(self._maximum, self._value // operand)


def _wrap(value: float, maximum: float) -> float:
    if value >= 0:
        return math.fmod(value, maximum)
    return maximum - math.fmod(-value, maximum)


@total_ordering
class FloatPeriodic:
    """A real number wrapped into ``[0, maximum)``.

    Negative values wrap from the top. Two instances compare by maximum
    first and then by value.
    """

    __slots__ = ("_maximum", "_value")

    def __init__(self, maximum: float, value: float = 0.0) -> None:
        _check_maximum(maximum)
        self._maximum = float(maximum)
        self._value = _wrap(float(value), self._maximum)

    @property
    def maximum(self) -> float:
        """The period."""
        return self._maximum

    @property
    def value(self) -> float:
        """The current value."""
        return self._value

    def set_max(self, maximum: float) -> None:
        """Change the period, reducing the value into the new range."""
        _check_maximum(maximum)
        self._maximum = float(maximum)
        self._value = math.fmod(self._value, self._maximum)

    def _operand(self, other: object) -> float | None:
        if isinstance(other, FloatPeriodic):
            return math.fmod(other._value, self._maximum)
        if isinstance(other, Real):
            return _wrap(float(other), self._maximum)
        return None

    def __float__(self) -> float:
        return self._value

    def __repr__(self) -> str:
        return f"FloatPeriodic({self._maximum}, {self._value})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FloatPeriodic):
            return NotImplemented
        return (self._maximum, self._value) == (other._maximum, other._value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FloatPeriodic):
            return NotImplemented
        return (self._maximum, self._value) < (other._maximum, other._value)

    def __hash__(self) -> int:
        return hash((self._maximum, self._value))

    def __neg__(self) -> FloatPeriodic:
        return FloatPeriodic(self._maximum, self._maximum - self._value)

    def __add__(self, other: FloatPeriodic | float) -> FloatPeriodic:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return FloatPeriodic(self._maximum, math.fmod(self._value + operand, self._maximum))

    def __sub__(self, other: FloatPeriodic | float) -> FloatPeriodic:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        if operand >= self._value:
            result = math.fmod(self._maximum - (operand - self._value), self._maximum)
        else:
            result = math.fmod(self._value - operand, self._maximum)
        return FloatPeriodic(self._maximum, result)

    def __mul__(self, other: FloatPeriodic | float) -> FloatPeriodic:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return FloatPeriodic(self._maximum, math.fmod(self._value * operand, self._maximum))

    def __truediv__(self, other: FloatPeriodic | float) -> FloatPeriodic:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return FloatPeriodic(self._maximum, math.fmod(self._value / operand, self._maximum))