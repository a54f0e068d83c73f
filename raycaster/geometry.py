"""
Geometry primitives: cartesian positions, polar vectors and line segments.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Tuple


def from_polar(length: float, angle: float) -> Tuple[float, float]:
    """Convert a polar offset (angle in radians) to a cartesian (dx, dy) pair."""
    return (length * math.cos(angle), length * math.sin(angle))


def to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * (math.pi / 180)


@dataclass(frozen=True)
class Position:
    """Cartesian point in panel coordinates."""

    x: float
    y: float

    def rounded(self) -> Tuple[int, int]:
        """Return the nearest device pixel for this point."""
        return (round(self.x), round(self.y))


@dataclass(frozen=True)
class Vector:
    """Polar offset: direction in radians and length."""

    angle: float
    length: float


@dataclass(frozen=True)
class Line:
    """
    Segment anchored at `position` and extending along `vector`.
    Endpoints are derived on every access, never stored.
    """

    position: Position
    vector: Vector

    @property
    def point1(self) -> Position:
        return self.position

    @property
    def point2(self) -> Position:
        dx, dy = from_polar(self.vector.length, self.vector.angle)
        return Position(self.position.x + dx, self.position.y + dy)
