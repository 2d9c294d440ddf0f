"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain import Board, Direction, Position, Tile
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction whose target cell is not part of the snake.
    """

    def __init__(self, name: str = None, rng: Optional[random.Random] = None):
        super().__init__(name)
        self.rng = rng or random.Random()

    def get_move(self, board: Board, last_direction: Direction) -> Direction:
        head = board.head
        if head is None:
            return last_direction

        # The board wraps, so every neighbour exists; only the snake blocks.
        # The tail counts as blocked because it has not moved yet.
        valid_moves: List[Direction] = []
        for move in Direction:
            dx, dy = move.delta
            target = Position((head.x + dx) % board.width, (head.y + dy) % board.height)
            if board.tile_at(*target) in (Tile.SNAKE, Tile.HEAD):
                continue
            valid_moves.append(move)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return Direction.random(self.rng)

        return self.rng.choice(valid_moves)
