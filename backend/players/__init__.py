"""
Player implementations for the snake engine.

Players choose directions automatically so a session can run headless.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
