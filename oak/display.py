"""The emulator window."""

from __future__ import annotations

import pygame

from oak import log

_started = False


class QuitRequested(Exception):
    """Raised when the window system asks the program to quit."""


def start_renderer() -> None:
    """Initialise the video system; raise RuntimeError on failure.

    Calling it again once started does nothing.
    """
    global _started
    if _started:
        return
    try:
        pygame.display.init()
    except pygame.error as exc:
        log.error("Failed to initialise SDL: ", exc)
        raise RuntimeError(f"Failed to initialise renderer: {exc}") from exc
    _started = True
    log.debug("Initialised SDL")


def stop_renderer() -> None:
    """Shut the video system down."""
    global _started
    log.debug("Closing SDL")
    pygame.quit()
    _started = False


class Display:
    """A window of fixed size that can switch to full screen."""

    def __init__(self, name: str, width: int, height: int) -> None:
        self.size = (width, height)
        self.fullscreen = False
        self.surface = pygame.display.set_mode(self.size)
        pygame.display.set_caption(name)
        self.clear()

    def clear(self) -> None:
        """Fill the window with black."""
        self.surface.fill((0x00, 0x00, 0x00))
        pygame.display.flip()

    def process_events(self) -> list:
        """Return the pending events.

        Raises QuitRequested when a quit event is among them.
        """
        events = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                log.info("Received SDL quit")
                raise QuitRequested()
            events.append(event)
        return events

    def set_fullscreen(self, fullscreen: bool) -> None:
        """Enter or leave full screen; raise RuntimeError on failure."""
        flags = pygame.FULLSCREEN if fullscreen else 0
        try:
            self.surface = pygame.display.set_mode(self.size, flags)
        except pygame.error as exc:
            log.error("Failure setting window fullscreen [ ", fullscreen, " ]: ", exc)
            raise RuntimeError(f"Failed to set fullscreen: {exc}") from exc
        self.fullscreen = bool(fullscreen)
        log.debug("Set fullscreen [ ", int(self.fullscreen), " ]")

    def toggle_fullscreen(self) -> None:
        """Switch between windowed and full screen."""
        log.debug("Toggling fullscreen")
        self.set_fullscreen(not self.fullscreen)