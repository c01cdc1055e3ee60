from __future__ import annotations

from collections import namedtuple

from .geometry import DOWN, LEFT, RIGHT, UP

Event = namedtuple("Event", ["kind", "key"])
# kind: one of KEY, RESIZE, TICK, OTHER
# key: one of the key names below for KEY events, else None

KEY = "key"
RESIZE = "resize"
TICK = "tick"
OTHER = "other"

KEY_UP = "up"
KEY_DOWN = "down"
KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_QUIT = "quit"

KEY_VECTORS = {
    KEY_UP: UP,
    KEY_DOWN: DOWN,
    KEY_LEFT: LEFT,
    KEY_RIGHT: RIGHT,
}

TICK_EVENT = Event(TICK, None)
