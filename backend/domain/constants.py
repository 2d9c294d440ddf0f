"""
Game constants for the snake engine.
"""

import random
from enum import Enum
from typing import Optional, Tuple


class Direction(str, Enum):
    """Movement directions. Up decreases y, Left decreases x."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> "Direction":
        return (rng or random).choice(list(cls))


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Game settings
INITIAL_SNAKE = ((7, 5), (7, 6), (7, 7), (6, 7), (5, 7))  # head first
INITIAL_DIRECTION = UP


def resolve_direction(requested, last: Direction) -> Direction:
    """
    Return the direction the snake actually moves in.

    A request for the opposite of the last direction is replaced by the
    last direction, so the snake can never reverse into its own neck.
    Raises ValueError for anything that is not a valid move.
    """
    direction = Direction(requested)
    if direction == last.opposite:
        return last
    return direction
