"""
Window host boundary: the narrow set of capabilities a panel needs from the
windowing toolkit, and a pygame-backed implementation.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import pygame

from .config import SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_TITLE

logger = logging.getLogger(__name__)

# Event posted to the pygame queue by the redraw timer
TICK_EVENT = pygame.USEREVENT + 1


@dataclass(eq=False)
class TimerHandle:
    """A recurring timer registered with the host."""

    event_type: int
    interval_ms: int
    active: bool = True


class WindowHost:
    """Abstract base class for window hosts."""

    def create_panel(self) -> pygame.Surface:
        raise NotImplementedError("WindowHost.create_panel must be implemented by subclasses")

    def panel_size(self) -> Tuple[int, int]:
        raise NotImplementedError("WindowHost.panel_size must be implemented by subclasses")

    def panel_surface(self) -> pygame.Surface:
        """Return the visible surface frames are blitted onto."""
        raise NotImplementedError("WindowHost.panel_surface must be implemented by subclasses")

    def create_buffer(self, width: int, height: int) -> pygame.Surface:
        raise NotImplementedError("WindowHost.create_buffer must be implemented by subclasses")

    def release_buffer(self, buffer: pygame.Surface) -> None:
        raise NotImplementedError("WindowHost.release_buffer must be implemented by subclasses")

    def present(self, rect: pygame.Rect) -> None:
        """Make the given region of the visible surface appear on screen."""
        raise NotImplementedError("WindowHost.present must be implemented by subclasses")

    def start_timer(self, interval_ms: int) -> TimerHandle:
        raise NotImplementedError("WindowHost.start_timer must be implemented by subclasses")

    def cancel_timer(self, handle: TimerHandle) -> None:
        raise NotImplementedError("WindowHost.cancel_timer must be implemented by subclasses")

    def destroy_panel(self) -> None:
        raise NotImplementedError("WindowHost.destroy_panel must be implemented by subclasses")


class PygameWindowHost(WindowHost):
    """Host backed by a resizable pygame display window."""

    def __init__(
        self,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        title: str = WINDOW_TITLE,
    ) -> None:
        self.width = width
        self.height = height
        self.title = title
        self._screen: Optional[pygame.Surface] = None

    def create_panel(self) -> pygame.Surface:
        self._screen = pygame.display.set_mode(
            (self.width, self.height), pygame.RESIZABLE
        )
        pygame.display.set_caption(self.title)
        logger.debug("Created %dx%d panel", self.width, self.height)
        return self._screen

    def panel_size(self) -> Tuple[int, int]:
        return self.panel_surface().get_size()

    def panel_surface(self) -> pygame.Surface:
        # The display surface is replaced by SDL when the window is resized
        surface = pygame.display.get_surface()
        if surface is None:
            raise RuntimeError("Panel surface has been destroyed")
        self._screen = surface
        return surface

    def create_buffer(self, width: int, height: int) -> pygame.Surface:
        return pygame.Surface((width, height))

    def release_buffer(self, buffer: pygame.Surface) -> None:
        # Pixel memory is freed with the last reference to the surface
        logger.debug("Released %dx%d buffer", *buffer.get_size())

    def present(self, rect: pygame.Rect) -> None:
        pygame.display.update(rect)

    def start_timer(self, interval_ms: int) -> TimerHandle:
        pygame.time.set_timer(TICK_EVENT, interval_ms)
        return TimerHandle(TICK_EVENT, interval_ms)

    def cancel_timer(self, handle: TimerHandle) -> None:
        pygame.time.set_timer(handle.event_type, 0)
        handle.active = False

    def destroy_panel(self) -> None:
        self._screen = None
        pygame.display.quit()
