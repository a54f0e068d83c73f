from __future__ import annotations
import logging
import pygame
from typing import Optional

from .config import SCREEN_WIDTH, SCREEN_HEIGHT, FPS, TICK_INTERVAL_MS
from .host import PygameWindowHost, WindowHost
from .input_handler import InputHandler
from .panel import PanelController

logger = logging.getLogger(__name__)


class App:
    """Main application: wires the window host, panel controller and input loop."""

    def __init__(
        self,
        host: Optional[WindowHost] = None,
        tick_interval_ms: int = TICK_INTERVAL_MS,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        clock: Optional[pygame.time.Clock] = None,
    ) -> None:
        pygame.init()
        self.host = host or PygameWindowHost(width, height)
        # Clock caps the polling rate (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.fps = FPS
        self.panel = PanelController(self.host, tick_interval_ms)
        self.input = InputHandler()
        self.running = True

    def handle_events(self) -> None:
        """Forward this frame's events to the panel."""
        for event in self.input.process_events():
            self.panel.handle(event)
        if self.input.should_quit() or not self.panel.is_running:
            self.running = False

    def run(self) -> None:
        """Main loop: initialize the panel, then dispatch events until it shuts down."""
        try:
            self.panel.init()
            while self.running:
                self.clock.tick(self.fps)
                self.handle_events()
        finally:
            # The timer must not outlive the loop, whatever ended it
            if self.panel.is_running:
                logger.info("Loop exited with panel still running; shutting down")
                self.panel.shutdown()
            pygame.quit()
