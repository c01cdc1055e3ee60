from __future__ import annotations

import random
from collections import deque

import pytest

from termsnake.errors import SurfaceError
from termsnake.events import KEY, KEY_QUIT, Event


class FakeSurface:
    """Surface that replays scripted events and records what gets drawn."""

    def __init__(self, events=(), cols=80, rows=24, fail_open=False):
        self.events = deque(events)
        self.cols = cols
        self.rows = rows
        self.fail_open = fail_open
        self.cells: dict[tuple[int, int], tuple[str, str, str]] = {}
        self.frames = 0
        self.ticking = False
        self.tick_ms = None
        self.opened = False
        self.closed = False

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def open(self):
        if self.fail_open:
            raise SurfaceError("no terminal")
        self.opened = True

    def close(self):
        self.ticking = False
        self.closed = True

    def next_event(self):
        if not self.events:
            return Event(KEY, KEY_QUIT)
        return self.events.popleft()

    def set_cell(self, col, row, glyph, fg, bg):
        self.cells[(col, row)] = (glyph, fg, bg)

    def clear(self):
        self.cells.clear()

    def flush(self):
        self.frames += 1

    def size(self):
        return self.cols, self.rows

    def start_ticks(self, ms):
        self.ticking = True
        self.tick_ms = ms

    def stop_ticks(self):
        self.ticking = False


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def make_surface():
    return FakeSurface
