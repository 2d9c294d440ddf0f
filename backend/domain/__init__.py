"""
Domain entities for the snake game engine.

This module contains the core game entities that are independent of
timing and threading concerns.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, INITIAL_SNAKE, INITIAL_DIRECTION,
    Direction, resolve_direction,
)
from .board import Board, Position, Tile
from .snake import Snake
from .game import Game, GameStep, Continue, Lose, LOSE, place_food

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'INITIAL_SNAKE', 'INITIAL_DIRECTION',
    'Direction', 'resolve_direction',
    'Board', 'Position', 'Tile',
    'Snake',
    'Game', 'GameStep', 'Continue', 'Lose', 'LOSE', 'place_food',
]
