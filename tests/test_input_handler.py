import pygame
import pytest

from raycaster.events import EventType, PanelEvent
from raycaster.host import TICK_EVENT
from raycaster.input_handler import InputHandler


def ev(type_, **attrs):
    return pygame.event.Event(type_, **attrs)


@pytest.mark.parametrize(
    "raw,expected",
    [
        (ev(pygame.MOUSEMOTION, pos=(3, 4), rel=(0, 0), buttons=(0, 0, 0)), PanelEvent.pointer_moved(3, 4)),
        (ev(pygame.VIDEORESIZE, w=640, h=480, size=(640, 480)), PanelEvent.resize(640, 480)),
        (ev(pygame.VIDEOEXPOSE), PanelEvent.expose()),
        (ev(pygame.WINDOWEXPOSED), PanelEvent.expose()),
        (ev(TICK_EVENT), PanelEvent.tick()),
        (ev(pygame.QUIT), PanelEvent.shutdown()),
        (ev(pygame.KEYDOWN, key=pygame.K_x, mod=0), PanelEvent.shutdown()),
        (ev(pygame.KEYDOWN, key=pygame.K_ESCAPE, mod=0), PanelEvent.shutdown()),
        (ev(pygame.MOUSEBUTTONDOWN, pos=(1, 2), button=1), PanelEvent(EventType.BUTTON_DOWN, pos=(1, 2))),
        (ev(pygame.MOUSEBUTTONUP, pos=(1, 2), button=1), PanelEvent(EventType.BUTTON_UP, pos=(1, 2))),
        (ev(pygame.KEYDOWN, key=pygame.K_a, mod=0), PanelEvent(EventType.UNKNOWN)),
    ],
)
def test_translate(raw, expected):
    assert InputHandler().translate(raw) == expected


def test_ticks_are_coalesced_and_drawn_last():
    handler = InputHandler()
    events = handler.process_events(
        [
            ev(TICK_EVENT),
            ev(pygame.MOUSEMOTION, pos=(10, 10), rel=(0, 0), buttons=(0, 0, 0)),
            ev(TICK_EVENT),
            ev(pygame.MOUSEMOTION, pos=(20, 20), rel=(0, 0), buttons=(0, 0, 0)),
            ev(TICK_EVENT),
        ]
    )
    assert events == [
        PanelEvent.pointer_moved(10, 10),
        PanelEvent.pointer_moved(20, 20),
        PanelEvent.tick(),
    ]


def test_exposes_are_coalesced():
    handler = InputHandler()
    events = handler.process_events(
        [ev(pygame.VIDEOEXPOSE), ev(pygame.WINDOWEXPOSED), ev(pygame.VIDEOEXPOSE)]
    )
    assert events == [PanelEvent.expose()]


def test_quit_flag_resets_each_poll():
    handler = InputHandler()
    handler.process_events([ev(pygame.QUIT)])
    assert handler.should_quit()
    handler.process_events([])
    assert not handler.should_quit()


def test_polls_pygame_queue_by_default(monkeypatch):
    monkeypatch.setattr(pygame.event, "get", lambda: [ev(TICK_EVENT)])
    assert InputHandler().process_events() == [PanelEvent.tick()]
