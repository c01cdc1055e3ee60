from __future__ import annotations

from collections import namedtuple


class Point(namedtuple("Point", ["x", "y"])):
    """Integer grid coordinate. Equality and hashing are component-wise."""

    __slots__ = ()

    def transform(self, vector: Vector) -> Point:
        return Point(self.x + vector.x, self.y + vector.y)

    def __repr__(self):
        return f"Point({self.x}, {self.y})"


class Vector(namedtuple("Vector", ["x", "y"])):
    """Single-step displacement on the grid."""

    __slots__ = ()

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def __add__(self, other):
        return Vector(self.x + other.x, self.y + other.y)

    def __repr__(self):
        return f"Vector({self.x}, {self.y})"


ZERO = Vector(0, 0)
UP = Vector(0, -1)
DOWN = Vector(0, 1)
LEFT = Vector(-1, 0)
RIGHT = Vector(1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)
