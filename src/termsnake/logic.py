from __future__ import annotations

import logging
import random
from collections.abc import Iterable

from . import config
from .errors import BoardFullError
from .geometry import Point
from .state import Food, Snake, Wall

logger = logging.getLogger(__name__)


def intersect(point: Point, points: Iterable[Point]) -> bool:
    return point in points


def can_eat(snake: Snake, food: Food) -> bool:
    """True if the snake's next step lands on the food."""
    return snake.head().transform(snake.vector) == food.point


def collided(snake: Snake, wall: Wall) -> bool:
    head = snake.head()
    return intersect(head, snake.points()[1:]) or intersect(head, wall.points())


def random_food(
    p1: Point,
    p2: Point,
    excludes: Iterable[Point],
    rng: random.Random,
    max_tries: int = config.FOOD_MAX_TRIES,
) -> Food:
    """Place food on a random interior cell that is not in `excludes`.

    Draws uniformly from the open rectangle between the corners, rejecting
    excluded cells. After `max_tries` rejections the remaining free cells are
    listed and one is picked from them, so a crowded board still terminates.
    Raises BoardFullError when no interior cell is free.
    """
    excluded = set(excludes)
    for _ in range(max_tries):
        point = Point(rng.randrange(p1.x + 1, p2.x), rng.randrange(p1.y + 1, p2.y))
        if point not in excluded:
            return Food(point.x, point.y)

    free = [
        Point(x, y)
        for x in range(p1.x + 1, p2.x)
        for y in range(p1.y + 1, p2.y)
        if Point(x, y) not in excluded
    ]
    logger.debug("food sampling gave up after %d tries, %d free cells", max_tries, len(free))
    if not free:
        raise BoardFullError(f"no free cell between {p1} and {p2}")
    point = rng.choice(free)
    return Food(point.x, point.y)
