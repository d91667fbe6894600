import pygame
import pytest

from oak.display import (
    Display,
    QuitRequested,
    start_renderer,
    stop_renderer,
)


@pytest.fixture
def renderer(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    start_renderer()
    yield
    stop_renderer()


def test_start_renderer_is_idempotent(renderer):
    start_renderer()
    display = Display("Oak", 80, 60)
    assert pygame.display.get_init() is True
    assert display.surface.get_size() == (80, 60)


def test_stop_renderer_shuts_video_down_and_can_restart(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    start_renderer()
    stop_renderer()
    assert pygame.display.get_init() is False
    start_renderer()
    try:
        display = Display("Oak", 40, 30)
        assert display.surface.get_size() == (40, 30)
    finally:
        stop_renderer()


def test_window_has_requested_size_and_caption(renderer):
    display = Display("Oak", 320, 200)
    assert display.surface.get_size() == (320, 200)
    assert pygame.display.get_caption()[0] == "Oak"


def test_clear_paints_black(renderer):
    display = Display("Oak", 64, 48)
    display.surface.fill((255, 0, 0))
    display.clear()
    assert tuple(display.surface.get_at((0, 0)))[:3] == (0, 0, 0)


def test_new_window_is_not_fullscreen(renderer):
    display = Display("Oak", 64, 48)
    assert display.fullscreen is False


def test_toggle_fullscreen_flips_state(renderer):
    display = Display("Oak", 64, 48)
    display.toggle_fullscreen()
    assert display.fullscreen is True
    display.toggle_fullscreen()
    assert display.fullscreen is False


def test_set_fullscreen_false_keeps_window(renderer):
    display = Display("Oak", 64, 48)
    display.set_fullscreen(False)
    assert display.fullscreen is False
    assert display.surface.get_size() == (64, 48)


def test_process_events_returns_pending_events(renderer):
    display = Display("Oak", 64, 48)
    display.process_events()
    pygame.event.post(pygame.event.Event(pygame.USEREVENT, code=7))
    events = display.process_events()
    assert [e.code for e in events if e.type == pygame.USEREVENT] == [7]


def test_process_events_raises_on_quit(renderer):
    display = Display("Oak", 64, 48)
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    with pytest.raises(QuitRequested):
        display.process_events()