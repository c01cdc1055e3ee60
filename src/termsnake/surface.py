from __future__ import annotations


class Surface:
    """Character-cell screen plus the event source feeding the game loop.

    Subclasses implement open/close, next_event, set_cell, clear, flush,
    size, start_ticks and stop_ticks. Use as a context manager so the
    screen is always released.
    """

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
