"""
Board snapshot - a read-only view of the grid derived from snake and food.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple


class Position(NamedTuple):
    x: int
    y: int


class Tile(Enum):
    EMPTY = "."
    SNAKE = "S"
    HEAD = "H"
    FOOD = "F"


HEAD_ARROWS = {"UP": "^", "DOWN": "v", "LEFT": "<", "RIGHT": ">"}


@dataclass(frozen=True)
class Board:
    """
    Immutable width x height grid of tiles, stored row-major.

    A Board is never updated in place; every tick derives a fresh one.
    """

    width: int
    height: int
    tiles: Tuple[Tile, ...]

    @classmethod
    def derive(
        cls,
        width: int,
        height: int,
        snake: Iterable[Position],
        food: Optional[Position],
    ) -> "Board":
        """
        Build a board from the snake (head first) and the food position.

        Food is marked first, then every snake cell, then the head, so the
        head always wins over the generic snake marking.
        """
        tiles: List[Tile] = [Tile.EMPTY] * (width * height)
        if food is not None:
            tiles[food.y * width + food.x] = Tile.FOOD
        head = None
        for position in snake:
            if head is None:
                head = position
            tiles[position.y * width + position.x] = Tile.SNAKE
        if head is not None:
            tiles[head.y * width + head.x] = Tile.HEAD
        return cls(width=width, height=height, tiles=tuple(tiles))

    def tile_at(self, x: int, y: int) -> Tile:
        return self.tiles[y * self.width + x]

    def rows(self) -> Iterator[Tuple[Tile, ...]]:
        for y in range(self.height):
            yield self.tiles[y * self.width:(y + 1) * self.width]

    def find(self, tile: Tile) -> List[Position]:
        """Return every position holding the given tile, in row-major order."""
        return [
            Position(index % self.width, index // self.width)
            for index, current in enumerate(self.tiles)
            if current is tile
        ]

    @property
    def head(self) -> Optional[Position]:
        heads = self.find(Tile.HEAD)
        return heads[0] if heads else None

    @property
    def food(self) -> Optional[Position]:
        food = self.find(Tile.FOOD)
        return food[0] if food else None

    @property
    def snake_length(self) -> int:
        return sum(1 for tile in self.tiles if tile in (Tile.SNAKE, Tile.HEAD))

    def print_board(self, direction=None) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S = snake body
        ^ v < > = snake head pointing in the given direction (H if unknown)
        Row 0 is printed first, matching the Up = y - 1 convention.
        """
        head_symbol = HEAD_ARROWS.get(getattr(direction, "value", direction), Tile.HEAD.value)
        result = []
        for y, row in enumerate(self.rows()):
            cells = [head_symbol if tile is Tile.HEAD else tile.value for tile in row]
            result.append(f"{y:2d} {' '.join(cells)}")

        # Add x-axis labels at the bottom
        result.append("   " + " ".join(str(x % 10) for x in range(self.width)))

        return "\n".join(result)
