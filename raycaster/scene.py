"""Fixed room layout: outer walls plus a few interior obstacles."""

from __future__ import annotations
from typing import Tuple

from .geometry import Line, Position, Vector, to_radians

Scene = Tuple[Line, ...]


def _wall(x: float, y: float, length: float, degrees: float) -> Line:
    return Line(Position(x, y), Vector(angle=to_radians(degrees), length=length))


def build_scene() -> Scene:
    """Return the ten wall segments of the room, in drawing order."""
    return (
        # Outer walls
        _wall(200, 200, 600, 0),
        _wall(800, 200, 600, 90),
        _wall(200, 200, 600, 90),
        _wall(800, 800, 600, 180),
        # Obstacles
        _wall(300, 680, 150, 250),
        _wall(650, 400, 120, 235),
        _wall(370, 250, 300, 70),
        _wall(500, 350, 300, 30),
        _wall(600, 600, 50, 315),
        _wall(420, 600, 50, 290),
    )
