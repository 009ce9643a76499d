"""Integer and rounding helpers with truncating integer division."""

from __future__ import annotations

import math


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


def greatest_common_divisor(a: int, b: int) -> int:
    """Euclid's algorithm using a remainder that truncates toward zero."""
    while b != 0:
        a, b = b, _trunc_mod(a, b)
    return a


def ceil_div(num: int, den: int) -> int:
    """Divide, rounding up for positive operands."""
    return _trunc_div(num + den - 1, den)


def round_up_to_multiple(value: int, multiple: int) -> int:
    """Smallest multiple of ``multiple`` not below ``value`` (positive inputs)."""
    return multiple * ceil_div(value, multiple)


def round_down_to_multiple(value: int, multiple: int) -> int:
    """Multiple of ``multiple`` reached by truncating ``value``."""
    return multiple * _trunc_div(value, multiple)


def round_to_decimal_points(value: float, decimal_points: int) -> float:
    """Round to ``decimal_points`` places, halves away from zero."""
    magnitude = 10.0**decimal_points
    scaled = value * magnitude
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / magnitude