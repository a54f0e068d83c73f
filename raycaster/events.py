"""
Typed panel events: the host adapter translates native window events into these.
"""

from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import Tuple


class EventType(enum.Enum):
    RESIZE = "resize"
    POINTER_MOVED = "pointer_moved"
    BUTTON_DOWN = "button_down"
    BUTTON_UP = "button_up"
    TIMER_TICK = "timer_tick"
    EXPOSE = "expose"
    SHUTDOWN = "shutdown"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class PanelEvent:
    """
    A single event for a panel controller.
    `size` is set for RESIZE, `pos` for pointer and button events.
    """

    type: EventType
    pos: Tuple[int, int] = (0, 0)
    size: Tuple[int, int] = (0, 0)

    @classmethod
    def resize(cls, width: int, height: int) -> PanelEvent:
        return cls(EventType.RESIZE, size=(width, height))

    @classmethod
    def pointer_moved(cls, x: int, y: int) -> PanelEvent:
        return cls(EventType.POINTER_MOVED, pos=(x, y))

    @classmethod
    def tick(cls) -> PanelEvent:
        return cls(EventType.TIMER_TICK)

    @classmethod
    def expose(cls) -> PanelEvent:
        return cls(EventType.EXPOSE)

    @classmethod
    def shutdown(cls) -> PanelEvent:
        return cls(EventType.SHUTDOWN)
