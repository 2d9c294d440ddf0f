"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Iterator, Tuple

from .board import Position


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Position from head at index 0 to tail at the end
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]):
        self.positions = deque(Position(x, y) for x, y in positions)

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Position:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def push_head(self, position: Position) -> None:
        self.positions.appendleft(position)

    def pop_tail(self) -> Position:
        return self.positions.pop()

    def __contains__(self, position) -> bool:
        return position in self.positions

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self)}>"
