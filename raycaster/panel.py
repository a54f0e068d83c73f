"""
Panel controller: owns the render state and runs the panel lifecycle
(init, resize, pointer tracking, timed redraw, expose, shutdown).
"""

from __future__ import annotations
import logging
import threading
from dataclasses import replace
from typing import Callable, Dict, Optional, Tuple

import numpy as np
import pygame

from .config import TICK_INTERVAL_MS, MIN_BUFFER_WIDTH, MIN_BUFFER_HEIGHT
from .draw import render_frame, blit_only, clear_frame, frame_pixels
from .events import EventType, PanelEvent
from .geometry import Position
from .host import WindowHost
from .resources import ResourceManager
from .scene import build_scene
from .state import PanelState, RenderState

logger = logging.getLogger(__name__)


class BufferAllocationError(RuntimeError):
    """The host could not provide an off-screen buffer."""


class PanelStateError(RuntimeError):
    """An operation was requested in a lifecycle state that does not allow it."""


def buffer_size_for(width: int, height: int) -> Tuple[int, int]:
    """Clamp a panel size to the smallest buffer we allocate."""
    return (max(int(width), MIN_BUFFER_WIDTH), max(int(height), MIN_BUFFER_HEIGHT))


class PanelController:
    """
    Single owner of a panel's RenderState.

    All transitions run under one lock, so a shutdown waits for an in-flight
    redraw and the buffer is never drawn and released at the same time.
    """

    def __init__(self, host: WindowHost, tick_interval_ms: int = TICK_INTERVAL_MS) -> None:
        if tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive")
        self.host = host
        self.tick_interval_ms = tick_interval_ms
        self.status = PanelState.UNINITIALIZED
        self.render_state: Optional[RenderState] = None
        self._res = ResourceManager()
        self._lock = threading.RLock()
        self._handlers: Dict[EventType, Callable[[PanelEvent], None]] = {
            EventType.RESIZE: lambda ev: self.resize(*ev.size),
            EventType.POINTER_MOVED: lambda ev: self.pointer_moved(*ev.pos),
            EventType.TIMER_TICK: lambda ev: self.timer_tick(),
            EventType.EXPOSE: lambda ev: self.expose(),
            EventType.SHUTDOWN: lambda ev: self.shutdown(),
        }

    @property
    def is_running(self) -> bool:
        return self.status is PanelState.RUNNING

    def init(self) -> None:
        """Create the panel, its buffer and scene, and start the redraw timer."""
        with self._lock:
            if self.status is not PanelState.UNINITIALIZED:
                raise PanelStateError(f"Cannot initialize a {self.status.value} panel")
            self.host.create_panel()
            size = buffer_size_for(*self.host.panel_size())
            try:
                buffer = self._allocate_buffer(size)
            except BufferAllocationError:
                self.host.destroy_panel()
                self.status = PanelState.TERMINATED
                raise
            scene = build_scene()
            try:
                timer = self._res.gen(
                    lambda: self.host.start_timer(self.tick_interval_ms),
                    self.host.cancel_timer,
                )
            except (pygame.error, RuntimeError, ValueError) as exc:
                logger.error("Could not start %d ms redraw timer: %s", self.tick_interval_ms, exc)
                self._res.shutdown()
                self.host.destroy_panel()
                self.status = PanelState.TERMINATED
                raise
            self.render_state = RenderState(
                cursor=Position(0.0, 0.0),
                scene=scene,
                buffer=buffer,
                buffer_size=size,
                timer=timer,
            )
            self.status = PanelState.RUNNING
            logger.info(
                "Panel running: %dx%d buffer, %d walls, %d ms tick",
                size[0],
                size[1],
                len(scene),
                self.tick_interval_ms,
            )

    def handle(self, event: PanelEvent) -> None:
        """Dispatch a host event; unknown events are accepted and ignored."""
        with self._lock:
            if not self._accepts(event.type.value):
                return
            handler = self._handlers.get(event.type)
            if handler is None:
                logger.debug("Ignoring %s event", event.type.value)
                return
            handler(event)

    def resize(self, width: int, height: int) -> None:
        """Swap in a cleared buffer matching the new panel size."""
        with self._lock:
            if not self._accepts("resize"):
                return
            prev = self.render_state
            size = buffer_size_for(width, height)
            buffer = self._allocate_buffer(size)
            state = replace(prev, buffer=buffer, buffer_size=size)
            self.host.present(clear_frame(state, self.host.panel_surface()))
            self._res.release(prev.buffer)
            self.render_state = state
            logger.debug("Resized buffer to %dx%d", *size)

    def pointer_moved(self, x: float, y: float) -> None:
        with self._lock:
            if not self._accepts("pointer_moved"):
                return
            self.render_state = replace(
                self.render_state, cursor=Position(float(x), float(y))
            )

    def timer_tick(self) -> None:
        """Render a full frame and show it."""
        with self._lock:
            if not self._accepts("timer_tick"):
                return
            self.host.present(render_frame(self.render_state, self.host.panel_surface()))

    def expose(self) -> None:
        """Re-show the last frame without redrawing it."""
        with self._lock:
            if not self._accepts("expose"):
                return
            self.host.present(blit_only(self.render_state, self.host.panel_surface()))

    def shutdown(self) -> None:
        """
        Cancel the timer, release the buffer and destroy the panel.
        Returns once everything is released.
        """
        with self._lock:
            if self.status is PanelState.TERMINATED:
                logger.warning("shutdown called on a terminated panel; ignoring")
                return
            if self.status is PanelState.RUNNING:
                state = self.render_state
                self._res.release(state.timer)
                self._res.release(state.buffer)
                self._res.shutdown()
                self.host.destroy_panel()
            self.render_state = None
            self.status = PanelState.TERMINATED
            logger.info("Panel terminated")

    def snapshot(self) -> np.ndarray:
        """Return the pixels currently on the visible surface."""
        with self._lock:
            if self.status is not PanelState.RUNNING:
                raise PanelStateError(f"Cannot read pixels of a {self.status.value} panel")
            return frame_pixels(self.host.panel_surface())

    def _allocate_buffer(self, size: Tuple[int, int]) -> pygame.Surface:
        try:
            return self._res.gen(
                lambda: self.host.create_buffer(*size), self.host.release_buffer
            )
        except (pygame.error, ValueError, MemoryError) as exc:
            logger.error("Buffer allocation failed for %dx%d: %s", size[0], size[1], exc)
            raise BufferAllocationError(
                f"Could not allocate {size[0]}x{size[1]} buffer: {exc}"
            ) from exc

    def _accepts(self, what: str) -> bool:
        if self.status is PanelState.RUNNING:
            return True
        logger.debug("Ignoring %s on %s panel", what, self.status.value)
        return False
