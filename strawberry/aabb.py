"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from strawberry.vector import Vector


@dataclass
class AABB:
    """A box given by its lowest corner ``position`` and its size ``extent``."""

    position: Vector
    extent: Vector

    def __post_init__(self) -> None:
        if len(self.position) != len(self.extent):
            raise ValueError(
                f"position has {len(self.position)} dimensions, extent has {len(self.extent)}"
            )
        if len(self.extent) == 0:
            raise ValueError("a box needs at least one dimension")

    @property
    def dimensions(self) -> int:
        """Number of axes."""
        return len(self.extent)

    def mensuration(self) -> Any:
        """Product of the extents: length, area, volume and so on."""
        return math.prod(self.extent)

    def area(self) -> Any:
        """Area of a two-dimensional box."""
        if self.dimensions != 2:
            raise ValueError(f"area needs a 2-dimensional box, not {self.dimensions}")
        return self.mensuration()

    def volume(self) -> Any:
        """Volume of a three-dimensional box."""
        if self.dimensions != 3:
            raise ValueError(f"volume needs a 3-dimensional box, not {self.dimensions}")
        return self.mensuration()

    def intersects(self, other: AABB) -> bool:
        """Whether the boxes overlap or touch on every axis."""
        if self.dimensions != other.dimensions:
            raise ValueError("boxes have different numbers of dimensions")

        def overlaps(p1: Any, e1: Any, p2: Any, e2: Any) -> bool:
            return p2 <= p1 <= p2 + e2 or p1 <= p2 <= p1 + e1

        return all(
            overlaps(p1, e1, p2, e2)
            for p1, e1, p2, e2 in zip(self.position, self.extent, other.position, other.extent)
        )