from __future__ import annotations

from . import config
from .geometry import RIGHT, Point, Vector

RUNNING = "running"
GAME_OVER = "game_over"

# Drawables expose `color` and `points()`; text items expose `color`,
# `cursor()` and `text()`. The renderer relies on nothing else.


class Wall:
    """Rectangular boundary between two corners, both inclusive."""

    def __init__(self, p1: Point, p2: Point):
        self.color = config.WALL_COLOR
        self.p1 = p1
        self.p2 = p2
        points: list[Point] = []
        for x in range(p1.x, p2.x + 1):
            for y in range(p1.y, p2.y + 1):
                if x in (p1.x, p2.x) or y in (p1.y, p2.y):
                    points.append(Point(x, y))
        self._points = points

    def points(self) -> list[Point]:
        return self._points


class Food:
    def __init__(self, x: int, y: int):
        self.color = config.FOOD_COLOR
        self.point = Point(x, y)

    def points(self) -> list[Point]:
        return [self.point]

    def __repr__(self):
        return f"Food({self.point.x}, {self.point.y})"


class Snake:
    def __init__(self, x: int, y: int):
        self.color = config.SNAKE_COLOR
        self.body: list[Point] = [Point(x, y)]
        self.vector: Vector = RIGHT

    def points(self) -> list[Point]:
        return self.body

    def head(self) -> Point:
        return self.body[0]

    def set_vector(self, vector: Vector) -> None:
        # Zero vectors and reversals are ignored.
        if not vector.is_zero() and not (self.vector + vector).is_zero():
            self.vector = vector

    def step(self) -> None:
        """Advance one cell in the current direction, keeping the length."""
        self.body[1:] = self.body[:-1]
        self.body[0] = self.body[0].transform(self.vector)

    def eat(self) -> None:
        """Advance one cell and grow by one segment at the head."""
        self.body.insert(0, self.body[0].transform(self.vector))

    def __len__(self):
        return len(self.body)


class Scores:
    def __init__(self, x: int, y: int):
        self.color = config.SCORE_COLOR
        self.num = 0
        self._cursor = Point(x, y)

    def cursor(self) -> Point:
        return self._cursor

    def text(self) -> str:
        return f"NUM: {self.num}"

    def inc(self) -> None:
        self.num += 1
