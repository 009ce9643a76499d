"""Angle units that convert between radians and degrees."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Radians:
    """An angle in radians."""

    value: float = 0.0

    def __float__(self) -> float:
        return float(self.value)

    def to_degrees(self) -> Degrees:
        """The same angle in degrees."""
        return Degrees.from_radians(self)


@dataclass(frozen=True)
class Degrees:
    """An angle in degrees."""

    value: float = 0.0

    def __float__(self) -> float:
        return float(self.value)

    @classmethod
    def from_radians(cls, radians: Radians | float) -> Degrees:
        """Build from an angle in radians."""
        return cls(float(radians) * (180.0 / math.pi))

    def to_radians(self) -> Radians:
        """The same angle in radians."""
        return Radians(self.value * (math.pi / 180.0))