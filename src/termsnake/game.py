from __future__ import annotations

import logging
import random

from . import config
from .errors import BoardFullError, BoardTooSmallError
from .events import KEY, KEY_QUIT, KEY_VECTORS, TICK, Event
from .geometry import Point, Vector
from .logic import can_eat, collided, random_food
from .render import draw_game
from .state import GAME_OVER, RUNNING, Food, Scores, Snake, Wall

logger = logging.getLogger(__name__)

# Seeded once per process; pass your own to Game for reproducible runs.
_rng = random.Random()


class Game:
    """Owns the board and applies input and tick events to it.

    Only the thread running the event loop may call into a Game.
    """

    def __init__(self, wall: Wall, rng: random.Random | None = None):
        self.rng = rng if rng is not None else _rng
        self.wall = wall
        start = Point(wall.p2.x // 2, wall.p2.y // 2)
        if not (wall.p1.x < start.x < wall.p2.x and wall.p1.y < start.y < wall.p2.y):
            raise BoardTooSmallError(f"no room for a snake inside {wall.p1}-{wall.p2}")
        self.snake = Snake(start.x, start.y)
        self.scores = Scores(*config.SCORE_ANCHOR)
        try:
            self.food: Food | None = random_food(wall.p1, wall.p2, self.snake.points(), self.rng)
        except BoardFullError as e:
            raise BoardTooSmallError(f"no room for food inside {wall.p1}-{wall.p2}") from e
        self.phase = RUNNING
        self.won = False

    @classmethod
    def for_screen(cls, cols: int, rows: int, rng: random.Random | None = None) -> Game:
        """Lay the board out on a screen of `cols` x `rows` character cells."""
        width = cols // config.CELL_COLS // 2
        p1 = Point(*config.WALL_ORIGIN)
        p2 = Point(width - config.WALL_MARGIN, rows - config.WALL_MARGIN)
        if p2.x <= p1.x or p2.y <= p1.y:
            raise BoardTooSmallError(f"screen of {cols}x{rows} cells is too small")
        return cls(Wall(p1, p2), rng)

    @property
    def running(self) -> bool:
        return self.phase == RUNNING

    def steer(self, vector: Vector) -> None:
        if self.running:
            self.snake.set_vector(vector)

    def tick(self) -> bool:
        """Advance the simulation one step. Returns whether the game goes on."""
        if not self.running:
            return False

        if can_eat(self.snake, self.food):
            self.snake.eat()
            self.scores.inc()
            try:
                self.food = random_food(self.wall.p1, self.wall.p2, self.snake.points(), self.rng)
            except BoardFullError:
                self.food = None
                self._finish(won=True)
                return False
        else:
            self.snake.step()

        if collided(self.snake, self.wall):
            self._finish(won=False)
        return self.running

    def handle(self, event: Event) -> bool:
        """Apply one event. Returns False when the player asked to quit."""
        if event.kind == KEY:
            if event.key == KEY_QUIT:
                return False
            vector = KEY_VECTORS.get(event.key)
            if vector is not None:
                self.steer(vector)
        elif event.kind == TICK:
            self.tick()
        return True

    def _finish(self, won: bool) -> None:
        self.phase = GAME_OVER
        self.won = won
        self.snake.color = config.WIN_COLOR if won else config.DEAD_COLOR
        logger.info("game over at %s, score %d, won=%s", self.snake.head(), self.scores.num, won)


def run(surface, rng: random.Random | None = None) -> Game:
    """Play one game on an open surface until the player quits."""
    cols, rows = surface.size()
    game = Game.for_screen(cols, rows, rng)
    logger.info("board %s-%s on a %dx%d screen", game.wall.p1, game.wall.p2, cols, rows)

    draw_game(surface, game)
    surface.start_ticks(config.TICK_MS)
    ticking = True
    while True:
        event = surface.next_event()
        if not game.handle(event):
            break
        if event.kind == TICK:
            if ticking and not game.running:
                surface.stop_ticks()
                ticking = False
            draw_game(surface, game)
    return game
