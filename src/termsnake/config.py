from __future__ import annotations

import logging

# Simulation
TICK_MS = 200
WALL_ORIGIN = (2, 2)
# Distance kept between the bottom-right wall corner and the screen edge.
WALL_MARGIN = 3
SCORE_ANCHOR = (4, 1)
# Each grid cell spans this many character columns.
CELL_COLS = 2
FOOD_MAX_TRIES = 1000

# Colors by name; every surface maps these to its own palette.
DEFAULT = "default"
WALL_COLOR = "blue"
FOOD_COLOR = "yellow"
SNAKE_COLOR = "white"
DEAD_COLOR = "red"
WIN_COLOR = "green"
SCORE_COLOR = "white"

# Terminal
INPUT_POLL_S = 0.01
ESC_DELAY_MS = 25

# Window
WINDOW_COLS = 80
WINDOW_ROWS = 30
CELL_W = 10
CELL_H = 20
FONT_NAME = "monospace"
FONT_SIZE = 18
BACKGROUND = (0, 0, 0)
PALETTE = {
    DEFAULT: (200, 200, 200),
    "black": (0, 0, 0),
    "blue": (40, 80, 220),
    "yellow": (230, 200, 40),
    "white": (235, 235, 235),
    "red": (220, 40, 40),
    "green": (40, 200, 80),
}

# Logging
LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
LOG_BUFFER = 1000
