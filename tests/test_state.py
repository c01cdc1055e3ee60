from __future__ import annotations

import pytest

from termsnake import config
from termsnake.geometry import DIRECTIONS, DOWN, LEFT, RIGHT, UP, ZERO, Point
from termsnake.state import Food, Scores, Snake, Wall


def test_wall_is_the_perimeter() -> None:
    wall = Wall(Point(2, 2), Point(10, 10))
    points = wall.points()
    assert len(points) == 2 * (9 + 9) - 4
    assert len(set(points)) == len(points)
    for p in points:
        assert p.x in (2, 10) or p.y in (2, 10)
        assert 2 <= p.x <= 10 and 2 <= p.y <= 10
    assert Point(5, 5) not in points
    assert {Point(2, 2), Point(10, 2), Point(2, 10), Point(10, 10)} <= set(points)


def test_wall_rectangle_count() -> None:
    wall = Wall(Point(0, 0), Point(5, 3))
    assert len(wall.points()) == 2 * (6 + 4) - 4


def test_food_points_is_singleton() -> None:
    food = Food(3, 7)
    assert food.points() == [Point(3, 7)]
    assert food.color == config.FOOD_COLOR


def test_new_snake() -> None:
    snake = Snake(5, 6)
    assert snake.points() == [Point(5, 6)]
    assert snake.head() == Point(5, 6)
    assert snake.vector == RIGHT
    assert len(snake) == 1


def test_set_vector_ignores_zero_and_reverse() -> None:
    snake = Snake(5, 5)
    snake.set_vector(ZERO)
    assert snake.vector == RIGHT
    snake.set_vector(LEFT)
    assert snake.vector == RIGHT


@pytest.mark.parametrize("current", DIRECTIONS)
def test_set_vector_accepts_everything_but_the_reverse(current) -> None:
    for new in DIRECTIONS:
        snake = Snake(5, 5)
        snake.vector = current
        snake.set_vector(new)
        if (current + new).is_zero():
            assert snake.vector == current
        else:
            assert snake.vector == new


def test_set_vector_checks_against_current_direction() -> None:
    snake = Snake(5, 5)
    snake.set_vector(UP)
    # LEFT was the reverse of the old heading, not of UP.
    snake.set_vector(LEFT)
    assert snake.vector == LEFT
    snake.set_vector(RIGHT)
    assert snake.vector == LEFT


def test_step_shifts_body() -> None:
    snake = Snake(5, 5)
    snake.body = [Point(5, 5), Point(4, 5), Point(3, 5)]
    snake.step()
    assert snake.points() == [Point(6, 5), Point(5, 5), Point(4, 5)]


def test_step_keeps_length_and_follows_direction() -> None:
    snake = Snake(5, 5)
    for vector in (RIGHT, DOWN, DOWN, LEFT, UP):
        snake.set_vector(vector)
        before = snake.head()
        length = len(snake)
        snake.step()
        assert len(snake) == length
        assert snake.head() == before.transform(snake.vector)
        snake.eat()


def test_eat_grows_at_the_head() -> None:
    snake = Snake(4, 4)
    snake.eat()
    assert snake.points() == [Point(5, 4), Point(4, 4)]


def test_eat_keeps_the_tail() -> None:
    snake = Snake(5, 5)
    snake.body = [Point(5, 5), Point(4, 5), Point(3, 5)]
    snake.set_vector(DOWN)
    snake.eat()
    assert snake.points() == [Point(5, 6), Point(5, 5), Point(4, 5), Point(3, 5)]


def test_scores() -> None:
    scores = Scores(4, 1)
    assert scores.num == 0
    assert scores.text() == "NUM: 0"
    scores.inc()
    scores.inc()
    assert scores.num == 2
    assert scores.text() == "NUM: 2"
    assert scores.cursor() == Point(4, 1)
