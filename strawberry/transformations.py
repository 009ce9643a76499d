"""Homogeneous transformation matrices."""

from __future__ import annotations

from typing import Any

from strawberry.matrix import Matrix
from strawberry.vector import Vector


def _components(args: tuple[Any, ...]) -> list[Any]:
    if len(args) == 1 and isinstance(args[0], Vector):
        return list(args[0])
    return list(args)


def translate(*args: Any) -> Matrix:
    """Translation by a vector, given as a ``Vector`` or as its components."""
    offsets = _components(args)
    size = len(offsets)
    result = Matrix.identity(size + 1, size + 1)
    result[size] = [*offsets, 1]
    return result


def scale(*args: Any) -> Matrix:
    """Scaling along each axis, given as a ``Vector`` or as its factors."""
    factors = _components(args)
    size = len(factors)
    result = Matrix.identity(size + 1, size + 1)
    for axis, factor in enumerate(factors):
        result[axis][axis] = factor
    return result


def orthographic(
    left: float, right: float, top: float, bottom: float, near: float, far: float
) -> Matrix:
    """Orthographic projection of the given box onto normalised coordinates."""
    return Matrix(
        4,
        4,
        2.0 / (right - left),
        0.0,
        0.0,
        -(right + left) / (right - left),
        0.0,
        2.0 / (top - bottom),
        0.0,
        -(top + bottom) / (top - bottom),
        0.0,
        0.0,
        -2.0 / (far - near),
        -(far + near) / (far - near),
        0.0,
        0.0,
        0.0,
        1.0,
    )