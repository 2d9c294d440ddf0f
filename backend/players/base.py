"""
Base player interface for the game engine.
"""

from domain import Board, Direction


class Player:
    """
    Base class/interface for automatic direction sources.

    A player looks at the latest board snapshot and returns the direction
    it wants the snake to move in next.
    """

    def __init__(self, name: str = None):
        self.name = name or self.__class__.__name__

    def get_move(self, board: Board, last_direction: Direction) -> Direction:
        """
        Return a move direction given the current board.

        Args:
            board: Latest board snapshot
            last_direction: Direction the snake moved in on the previous tick

        Returns:
            One of the Direction members
        """
        raise NotImplementedError
