"""
Double-buffered draw pipeline: frames are drawn into the off-screen buffer and
reach the visible surface only through a single whole-buffer blit.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np
import pygame

from .config import (
    BACKGROUND_COLOR,
    CURSOR_COLOR,
    CURSOR_RADIUS,
    WALL_COLOR,
    WALL_WIDTH,
)

if TYPE_CHECKING:
    from .state import RenderState


def render_frame(state: RenderState, surface: pygame.Surface) -> pygame.Rect:
    """
    Draw the cursor marker and every wall into the buffer, then blit it.
    Returns the region of `surface` that was updated.
    """
    buffer = state.buffer
    buffer.fill(BACKGROUND_COLOR)
    # Filled marker, no outline
    pygame.draw.circle(buffer, CURSOR_COLOR, state.cursor.rounded(), CURSOR_RADIUS)
    for wall in state.scene:
        pygame.draw.line(
            buffer,
            WALL_COLOR,
            wall.point1.rounded(),
            wall.point2.rounded(),
            WALL_WIDTH,
        )
    return blit_only(state, surface)


def blit_only(state: RenderState, surface: pygame.Surface) -> pygame.Rect:
    """Copy the current buffer contents to `surface` without redrawing."""
    area = pygame.Rect((0, 0), state.buffer_size)
    return surface.blit(state.buffer, (0, 0), area)


def clear_frame(state: RenderState, surface: pygame.Surface) -> pygame.Rect:
    """Blank the buffer and show it."""
    state.buffer.fill(BACKGROUND_COLOR)
    return blit_only(state, surface)


def frame_pixels(surface: pygame.Surface) -> np.ndarray:
    """Return a (width, height, 3) copy of the RGB content of `surface`."""
    return pygame.surfarray.array3d(surface)
