"""
Game entity - the snake simulation state machine.

The game knows nothing about time or threads: callers advance it one tick
at a time with step() and receive a GameStep describing the outcome.
"""

import random
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .board import Board, Position
from .constants import INITIAL_DIRECTION, INITIAL_SNAKE, Direction, resolve_direction
from .snake import Snake


class GameStep:
    """Outcome of a single tick: either Continue(board) or Lose."""

    lost = False


@dataclass(frozen=True)
class Continue(GameStep):
    board: Board


@dataclass(frozen=True)
class Lose(GameStep):
    lost = True


LOSE = Lose()


def place_food(
    snake: Snake,
    width: int,
    height: int,
    rng: Optional[random.Random] = None,
) -> Optional[Position]:
    """
    Pick a uniformly random empty cell for the food.

    Returns None when the snake fills the whole board.
    """
    occupied = set(snake)
    candidates = [
        Position(x, y)
        for y in range(height)
        for x in range(width)
        if (x, y) not in occupied
    ]
    if not candidates:
        return None
    return (rng or random).choice(candidates)


class Game:
    """
    The single mutable game aggregate.

    Attributes:
        width, height: board dimensions (fixed for the session)
        snake: the Snake, head first
        food: Position of the food, or None when the board is full
        last_direction: direction applied on the previous tick
    """

    def __init__(
        self,
        width: int,
        height: int,
        snake_positions: Iterable[Tuple[int, int]] = INITIAL_SNAKE,
        rng: Optional[random.Random] = None,
    ):
        self.width = width
        self.height = height
        self.rng = rng
        self.snake = Snake(snake_positions)
        self.food = place_food(self.snake, width, height, rng)
        self.last_direction = INITIAL_DIRECTION

    def step(self, direction) -> GameStep:
        """
        Advance the game by one cell.

        Returns LOSE if the new head lands on any current segment (the tail
        included, since it has not moved yet); the game is left untouched.
        """
        direction = resolve_direction(direction, self.last_direction)
        head = self.next_head(direction)
        if head in self.snake:
            return LOSE

        self.snake.push_head(head)
        if head == self.food:
            self.food = place_food(self.snake, self.width, self.height, self.rng)
        else:
            self.snake.pop_tail()
        self.last_direction = direction
        return Continue(self.board())

    def next_head(self, direction: Direction) -> Position:
        """Head position after one move, wrapping around every edge."""
        dx, dy = Direction(direction).delta
        head = self.snake.head
        return Position((head.x + dx) % self.width, (head.y + dy) % self.height)

    def board(self) -> Board:
        return Board.derive(self.width, self.height, self.snake, self.food)

    def __str__(self):
        return self.board().print_board(self.last_direction)

    def __repr__(self):
        return (
            f"<Game {self.width}x{self.height}, snake={self.snake!r}, "
            f"food={self.food}, last_direction={self.last_direction.value}>"
        )
