from __future__ import annotations

import curses
import logging
import queue
import threading

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

_KEYS = {
    curses.KEY_UP: KEY_UP,
    curses.KEY_DOWN: KEY_DOWN,
    curses.KEY_LEFT: KEY_LEFT,
    curses.KEY_RIGHT: KEY_RIGHT,
    27: KEY_QUIT,  # Esc
}

_COLORS = {
    config.DEFAULT: -1,
    "black": curses.COLOR_BLACK,
    "blue": curses.COLOR_BLUE,
    "yellow": curses.COLOR_YELLOW,
    "white": curses.COLOR_WHITE,
    "red": curses.COLOR_RED,
    "green": curses.COLOR_GREEN,
}


def decode_key(ch: int) -> Event:
    """Classify a curses key code. Unknown keys come back with key=None."""
    if ch == curses.KEY_RESIZE:
        return Event(RESIZE, None)
    if ch < 0:
        return Event(OTHER, None)
    return Event(KEY, _KEYS.get(ch))


class Ticker:
    """Calls `put(TICK_EVENT)` every `interval` seconds on its own thread."""

    def __init__(self, interval: float, put):
        self.interval = interval
        self._put = put
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, name="termsnake-ticker", daemon=True)

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join()

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            self._put(TICK_EVENT)


class TerminalSurface(Surface):
    """curses terminal.

    Keys are polled on a background thread and the ticker runs on another;
    both put events on one queue that `next_event` drains. Every curses call
    goes through `_lock`.
    """

    def __init__(self):
        self._stdscr = None
        self._keys = None
        self._lock = threading.Lock()
        self._events: queue.Queue[Event] = queue.Queue()
        self._pairs: dict[tuple[str, str], int] = {}
        self._colors = False
        self._stop_input = threading.Event()
        self._input: threading.Thread | None = None
        self._ticker: Ticker | None = None

    def open(self) -> None:
        try:
            self._stdscr = curses.initscr()
            curses.noecho()
            curses.cbreak()
            curses.set_escdelay(config.ESC_DELAY_MS)
            if curses.has_colors():
                curses.start_color()
                curses.use_default_colors()
                self._colors = True
            # Keys are read from a 1x1 window in the corner, which the board
            # never covers, so reading never repaints the board.
            self._keys = curses.newwin(1, 1, 0, 0)
            self._keys.keypad(True)
            self._keys.nodelay(True)
        except (curses.error, OSError) as e:
            self._restore()
            raise SurfaceError(f"cannot initialize terminal: {e}") from e

        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("terminal cannot hide the cursor")

        self._stop_input.clear()
        self._input = threading.Thread(target=self._poll_input, name="termsnake-input", daemon=True)
        self._input.start()
        logger.debug("terminal opened, colors=%s", self._colors)

    def close(self) -> None:
        self.stop_ticks()
        self._stop_input.set()
        if self._input is not None:
            self._input.join()
            self._input = None
        self._restore()

    def _restore(self) -> None:
        if self._stdscr is None:
            return
        with self._lock:
            if self._keys is not None:
                self._keys.keypad(False)
                self._keys = None
            curses.nocbreak()
            curses.echo()
            curses.endwin()
            self._stdscr = None

    def _poll_input(self) -> None:
        while not self._stop_input.is_set():
            with self._lock:
                ch = self._keys.getch()
            if ch == -1:
                self._stop_input.wait(config.INPUT_POLL_S)
                continue
            self._events.put(decode_key(ch))

    def _attr(self, fg: str, bg: str) -> int:
        if not self._colors:
            # Without colors a filled cell still has to show up.
            return curses.A_REVERSE if bg != config.DEFAULT else curses.A_NORMAL
        key = (fg, bg)
        if key not in self._pairs:
            n = len(self._pairs) + 1
            curses.init_pair(n, _COLORS[fg], _COLORS[bg])
            self._pairs[key] = n
        return curses.color_pair(self._pairs[key])

    def next_event(self) -> Event:
        return self._events.get()

    def set_cell(self, col: int, row: int, glyph: str, fg: str, bg: str) -> None:
        with self._lock:
            rows, cols = self._stdscr.getmaxyx()
            if not (0 <= col < cols and 0 <= row < rows):
                return
            attr = self._attr(fg, bg)
            try:
                self._stdscr.addstr(row, col, glyph, attr)
            except curses.error:
                # addstr into the bottom-right cell writes the glyph, then
                # fails to advance the cursor.
                if (row, col) != (rows - 1, cols - 1):
                    raise

    def clear(self) -> None:
        with self._lock:
            self._stdscr.erase()

    def flush(self) -> None:
        with self._lock:
            self._stdscr.refresh()

    def size(self) -> tuple[int, int]:
        with self._lock:
            rows, cols = self._stdscr.getmaxyx()
        return cols, rows

    def start_ticks(self, ms: int) -> None:
        self.stop_ticks()
        self._ticker = Ticker(ms / 1000.0, self._events.put)
        self._ticker.start()

    def stop_ticks(self) -> None:
        if self._ticker is not None:
            self._ticker.stop()
            self._ticker = None
