"""
Input handling abstraction to decouple pygame events from the panel controller.
"""

from __future__ import annotations
import logging
import pygame
from typing import Iterable, List, Optional

from .events import EventType, PanelEvent
from .host import TICK_EVENT

logger = logging.getLogger(__name__)

_EXPOSE_TYPES = (pygame.VIDEOEXPOSE, pygame.WINDOWEXPOSED)


class InputHandler:
    """
    Translates pygame events into PanelEvents.
    Ticks and exposes pending in one poll are collapsed into a single event
    each, so a slow frame drops redraws instead of queueing them.
    """

    def __init__(self, tick_event: int = TICK_EVENT) -> None:
        self.tick_event = tick_event
        self._quit = False

    def process_events(
        self, raw_events: Optional[Iterable[pygame.event.Event]] = None
    ) -> List[PanelEvent]:
        """
        Poll pygame events (or translate the given ones) and return the
        panel events for this frame, in arrival order with one trailing tick.
        """
        self._quit = False
        if raw_events is None:
            raw_events = pygame.event.get()
        events: List[PanelEvent] = []
        ticked = False
        exposed = False
        for raw in raw_events:
            event = self.translate(raw)
            if event.type is EventType.TIMER_TICK:
                ticked = True
                continue
            if event.type is EventType.EXPOSE:
                if exposed:
                    continue
                exposed = True
            elif event.type is EventType.SHUTDOWN:
                self._quit = True
            events.append(event)
        # Draw after this frame's pointer updates
        if ticked:
            events.append(PanelEvent.tick())
        return events

    def translate(self, event: pygame.event.Event) -> PanelEvent:
        """Map a single pygame event to a PanelEvent (UNKNOWN if unhandled)."""
        if event.type == self.tick_event:
            return PanelEvent.tick()
        if event.type == pygame.QUIT:
            return PanelEvent.shutdown()
        if event.type == pygame.KEYDOWN and event.key in (pygame.K_x, pygame.K_ESCAPE):
            return PanelEvent.shutdown()
        if event.type == pygame.VIDEORESIZE:
            return PanelEvent.resize(event.w, event.h)
        if event.type == pygame.MOUSEMOTION:
            return PanelEvent.pointer_moved(*event.pos)
        if event.type == pygame.MOUSEBUTTONDOWN:
            return PanelEvent(EventType.BUTTON_DOWN, pos=event.pos)
        if event.type == pygame.MOUSEBUTTONUP:
            return PanelEvent(EventType.BUTTON_UP, pos=event.pos)
        if event.type in _EXPOSE_TYPES:
            return PanelEvent.expose()
        logger.debug("Unhandled pygame event %s", pygame.event.event_name(event.type))
        return PanelEvent(EventType.UNKNOWN)

    def should_quit(self) -> bool:
        """Return True if a quit request arrived in the last poll."""
        return self._quit
