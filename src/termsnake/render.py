from __future__ import annotations

from . import config


def draw(surface, *drawables) -> None:
    """Fill the cells of every drawable with its color.

    A grid point covers `config.CELL_COLS` adjacent character columns so the
    board looks square in a terminal.
    """
    for d in drawables:
        color = d.color
        for point in d.points():
            col = point.x * config.CELL_COLS
            for i in range(config.CELL_COLS):
                surface.set_cell(col + i, point.y, " ", config.DEFAULT, color)


def draw_text(surface, *texts) -> None:
    for t in texts:
        color = t.color
        cursor = t.cursor()
        for i, ch in enumerate(t.text()):
            surface.set_cell(cursor.x + i, cursor.y, ch, color, config.DEFAULT)


def draw_game(surface, game) -> None:
    surface.clear()
    drawables = [game.wall, game.snake]
    if game.food is not None:
        drawables.append(game.food)
    draw(surface, *drawables)
    draw_text(surface, game.scores)
    surface.flush()
