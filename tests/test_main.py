from __future__ import annotations

import logging
import re

from termsnake.__main__ import play
from termsnake.events import KEY, KEY_QUIT, TICK_EVENT, Event


def test_play_prints_the_score(make_surface, capsys) -> None:
    surface = make_surface([TICK_EVENT, Event(KEY, KEY_QUIT)])
    assert play(surface) == 0
    assert surface.closed
    assert re.fullmatch(r"Score: \d+\n", capsys.readouterr().out)


def test_play_reports_game_over(make_surface, capsys) -> None:
    surface = make_surface([TICK_EVENT] * 20)
    assert play(surface) == 0
    assert re.fullmatch(r"Game Over! Score: \d+\n", capsys.readouterr().out)


def test_surface_failure_exits_with_error(make_surface, capsys) -> None:
    surface = make_surface(fail_open=True)
    assert play(surface) == 1
    assert capsys.readouterr().err.startswith("error: no terminal")


def test_screen_too_small_exits_with_error(make_surface, capsys) -> None:
    surface = make_surface(cols=16, rows=24)
    assert play(surface) == 1
    assert surface.closed
    assert "too small" in capsys.readouterr().err


def test_play_restores_logging(make_surface) -> None:
    root = logging.getLogger()
    handlers = list(root.handlers)
    play(make_surface())
    assert root.handlers == handlers
