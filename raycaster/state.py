"""
Render state owned by a single panel controller.
"""

from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

import pygame

from .geometry import Position

if TYPE_CHECKING:
    from .host import TimerHandle
    from .scene import Scene


class PanelState(enum.Enum):
    """Lifecycle of a panel controller."""

    UNINITIALIZED = "uninitialized"
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class RenderState:
    """
    Everything the draw pipeline reads.
    Attributes:
        cursor: Last pointer position reported by the host.
        scene: Wall segments, fixed for the life of the panel.
        buffer: Off-screen surface frames are drawn into.
        buffer_size: (width, height) of `buffer`.
        timer: Handle of the running redraw timer.
    Transitions build a new instance with dataclasses.replace instead of
    mutating this one.
    """

    cursor: Position
    scene: Scene
    buffer: pygame.Surface
    buffer_size: Tuple[int, int]
    timer: TimerHandle
