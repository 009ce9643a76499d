"""Byte-order conversion of fixed-width integers."""

from __future__ import annotations

import sys

_NATIVE_BIG = sys.byteorder == "big"


def reverse_bytes(value: int, width: int) -> int:
    """Reverse the order of the ``width`` bytes of ``value``.

    Negative values are treated as two's complement and stay signed.
    """
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")
    signed = value < 0
    raw = value.to_bytes(width, "little", signed=signed)
    return int.from_bytes(raw[::-1], "little", signed=signed)


def to_big_endian(value: int, width: int) -> int:
    """Convert a native-order value to big-endian order."""
    return value if _NATIVE_BIG else reverse_bytes(value, width)


def to_little_endian(value: int, width: int) -> int:
    """Convert a native-order value to little-endian order."""
    return reverse_bytes(value, width) if _NATIVE_BIG else value


def from_big_endian(value: int, width: int) -> int:
    """Convert a big-endian value to native order."""
    return value if _NATIVE_BIG else reverse_bytes(value, width)


def from_little_endian(value: int, width: int) -> int:
    """Convert a little-endian value to native order."""
    return reverse_bytes(value, width) if _NATIVE_BIG else value