"""Fixed-length numeric vectors."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from functools import reduce
from numbers import Real
from operator import xor
from typing import Any

from strawberry.units import Radians


class Vector:
    """A sequence of numbers supporting vector arithmetic."""

    __slots__ = ("_values",)

    def __init__(self, *args: Any) -> None:
        self._values = list(args)

    @classmethod
    def zeros(cls, size: int) -> Vector:
        """A vector of ``size`` zeroes."""
        return cls(*([0] * size))

    def as_size(self, size: int) -> Vector:
        """Copy truncated or padded with zeroes to ``size`` elements."""
        kept = self._values[:size]
        return Vector(*kept, *([0] * (size - len(kept))))

    def as_type(self, kind: Callable[[Any], Any]) -> Vector:
        """Copy with every element converted by ``kind``."""
        return Vector(*map(kind, self._values))

    def offset(self, *args: Any) -> Vector:
        """This vector plus a vector built from ``args``."""
        return self + Vector(*args)

    def with_additional_values(self, *args: Any) -> Vector:
        """Copy with ``args`` appended."""
        return Vector(*self._values, *args)

    def map(self, function: Callable[[Any], Any]) -> Vector:
        """Apply ``function`` to every element."""
        return Vector(*map(function, self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __getitem__(self, index: int) -> Any:
        return self._values[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._values[index] = value

    def __repr__(self) -> str:
        return f"Vector({', '.join(map(repr, self._values))})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return reduce(xor, map(hash, self._values), 0)

    def _same_size(self, other: Vector) -> None:
        if len(self) != len(other):
            raise ValueError(f"vector sizes differ: {len(self)} and {len(other)}")

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._same_size(other)
        return Vector(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._same_size(other)
        return Vector(*(a - b for a, b in zip(self, other)))

    def __mul__(self, other: Vector | Real) -> Vector:
        if isinstance(other, Vector):
            self._same_size(other)
            return Vector(*(a * b for a, b in zip(self, other)))
        if isinstance(other, Real):
            return Vector(*(a * other for a in self))
        return NotImplemented

    def __rmul__(self, other: Real) -> Vector:
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __truediv__(self, other: Vector | Real) -> Vector:
        if isinstance(other, Vector):
            self._same_size(other)
            return Vector(*(a / b for a, b in zip(self, other)))
        if isinstance(other, Real):
            return self * (1 / other)
        return NotImplemented

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.square_magnitude())

    def square_magnitude(self) -> Any:
        """Sum of squared elements."""
        return sum(a * a for a in self._values)

    def normalised(self) -> Vector:
        """Vector of unit length in the same direction."""
        return self / self.magnitude()

    def dot(self, other: Vector) -> Any:
        """Dot product."""
        self._same_size(other)
        return sum(a * b for a, b in zip(self, other))

    def cross(self, other: Vector) -> Vector:
        """Cross product of two 3-element vectors."""
        if len(self) != 3 or len(other) != 3:
            raise ValueError("cross product needs two 3-element vectors")
        x1, y1, z1 = self
        x2, y2, z2 = other
        return Vector(y1 * z2 - z1 * y2, z1 * x2 - x1 * z2, x1 * y2 - y1 * x2)

    def angle_between(self, other: Vector) -> Radians:
        """Angle between this and ``other``."""
        cosine = self.dot(other) / math.sqrt(self.square_magnitude() * other.square_magnitude())
        return Radians(math.acos(cosine))

    def project_onto_plane(self, normal: Vector) -> Vector:
        """Project onto the plane through the origin with the given normal."""
        return self - normal.normalised() * self.dot(normal)