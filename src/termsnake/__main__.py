from __future__ import annotations

import logging
import logging.handlers
import sys

from . import config
from .errors import SnakeError
from .game import run


def _buffer_logs() -> logging.handlers.MemoryHandler:
    # The screen belongs to the surface while the game runs; hold records
    # until it is released.
    handler = logging.handlers.MemoryHandler(config.LOG_BUFFER, flushLevel=logging.CRITICAL + 1)
    handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(config.LOG_LEVEL)
    return handler


def _flush_logs(handler: logging.handlers.MemoryHandler) -> None:
    target = logging.StreamHandler(sys.stderr)
    target.setFormatter(logging.Formatter(config.LOG_FORMAT))
    handler.setTarget(target)
    handler.flush()
    logging.getLogger().removeHandler(handler)
    handler.close()


def play(surface) -> int:
    handler = _buffer_logs()
    try:
        with surface:
            game = run(surface)
    except SnakeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        _flush_logs(handler)
    print("Game Over! Score:" if not game.running else "Score:", game.scores.num)
    return 0


def main() -> int:
    from .terminal import TerminalSurface

    return play(TerminalSurface())


def window_main() -> int:
    from .window import WindowSurface

    return play(WindowSurface())


if __name__ == "__main__":
    raise SystemExit(main())
