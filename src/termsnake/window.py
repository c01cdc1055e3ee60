from __future__ import annotations

import logging

import pygame

from . import config
from .errors import SurfaceError
from .events import (
    KEY,
    KEY_DOWN,
    KEY_LEFT,
    KEY_QUIT,
    KEY_RIGHT,
    KEY_UP,
    OTHER,
    RESIZE,
    TICK_EVENT,
    Event,
)
from .surface import Surface

logger = logging.getLogger(__name__)

TICK_TYPE = pygame.USEREVENT + 1

_KEYS = {
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_ESCAPE: KEY_QUIT,
}


def decode_event(event: pygame.event.Event) -> Event:
    if event.type == TICK_TYPE:
        return TICK_EVENT
    if event.type == pygame.QUIT:
        return Event(KEY, KEY_QUIT)
    if event.type == pygame.KEYDOWN:
        return Event(KEY, _KEYS.get(event.key))
    if event.type == pygame.VIDEORESIZE:
        return Event(RESIZE, None)
    return Event(OTHER, None)


class WindowSurface(Surface):
    """pygame window drawn as a grid of character cells.

    Ticks come from pygame.time.set_timer, so the window's own event queue
    carries both input and timer events.
    """

    def __init__(self, cols: int = config.WINDOW_COLS, rows: int = config.WINDOW_ROWS):
        self.cols = cols
        self.rows = rows
        self._screen: pygame.Surface | None = None
        self._font = None

    def open(self) -> None:
        pygame.init()
        try:
            self._screen = pygame.display.set_mode((self.cols * config.CELL_W, self.rows * config.CELL_H))
            pygame.display.set_caption("termsnake")
            self._font = pygame.font.SysFont(config.FONT_NAME, config.FONT_SIZE)
        except pygame.error as e:
            pygame.quit()
            self._screen = None
            raise SurfaceError(f"cannot open window: {e}") from e
        logger.debug("window opened with %dx%d cells", self.cols, self.rows)

    def close(self) -> None:
        if self._screen is None:
            return
        self.stop_ticks()
        pygame.quit()
        self._screen = None

    def next_event(self) -> Event:
        return decode_event(pygame.event.wait())

    def set_cell(self, col: int, row: int, glyph: str, fg: str, bg: str) -> None:
        rect = pygame.Rect(col * config.CELL_W, row * config.CELL_H, config.CELL_W, config.CELL_H)
        if bg != config.DEFAULT:
            self._screen.fill(config.PALETTE[bg], rect)
        if glyph.strip():
            img = self._font.render(glyph, True, config.PALETTE[fg])
            self._screen.blit(img, rect)

    def clear(self) -> None:
        self._screen.fill(config.BACKGROUND)

    def flush(self) -> None:
        pygame.display.flip()

    def size(self) -> tuple[int, int]:
        return self.cols, self.rows

    def start_ticks(self, ms: int) -> None:
        pygame.time.set_timer(TICK_TYPE, ms)

    def stop_ticks(self) -> None:
        pygame.time.set_timer(TICK_TYPE, 0)
