"""
Headless entry point: run one snake session driven by an automatic player.

Usage:
    python backend/main.py [--width 12] [--height 12] [--max-steps 200] [--seed 42]
"""

import argparse
import json
import logging
import os
import random
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from domain import INITIAL_DIRECTION
from players import Player, RandomPlayer
from services.channels import ChannelClosed
from services.game_loop import Move, Start, init

load_dotenv()

LOG_LEVEL = os.getenv("SNAKE_LOG_LEVEL", "INFO")
DEFAULT_WIDTH = int(os.getenv("SNAKE_BOARD_WIDTH", "12"))
DEFAULT_HEIGHT = int(os.getenv("SNAKE_BOARD_HEIGHT", "12"))

logger = logging.getLogger(__name__)


def run_session(
    width: int,
    height: int,
    player: Player,
    max_steps: Optional[int] = None,
    seed: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Play a single game until it is lost or max_steps ticks have run.

    Args:
        width, height: board dimensions
        player: chooses the direction sent after every snapshot
        max_steps: stop (and disconnect) after this many ticks; None plays to the end
        seed: seed for food placement

    Returns:
        A dictionary summarizing the session (result, ticks, length).
    """
    rng = random.Random(seed) if seed is not None else None
    control_tx, step_rx = init(width, height, rng=rng)
    control_tx.send(Start())

    result = "stopped"
    ticks = 0
    length = 0
    last_direction = INITIAL_DIRECTION
    try:
        for ticks, step in enumerate(step_rx):
            if step.lost:
                result = "lost"
                break
            board = step.board
            length = board.snake_length
            logger.debug("Board after tick %d:\n%s", ticks, board.print_board(last_direction))
            if max_steps is not None and ticks >= max_steps:
                break
            move = player.get_move(board, last_direction)
            try:
                control_tx.send(Move(move))
            except ChannelClosed:
                # The loop already stopped; keep reading to pick up a queued Lose.
                continue
            if move != last_direction.opposite:
                last_direction = move
    finally:
        # Dropping both ends tells the loop we have gone away.
        step_rx.close()
        control_tx.close()

    logger.info("Session %s after %d ticks with length %d", result, ticks, length)
    return {"result": result, "ticks": ticks, "length": length}


def main():
    parser = argparse.ArgumentParser(
        description="Run a headless snake game driven by a random player."
    )
    parser.add_argument("--width", type=int, required=False, default=DEFAULT_WIDTH,
                        help="Width of the board")
    parser.add_argument("--height", type=int, required=False, default=DEFAULT_HEIGHT,
                        help="Height of the board")
    parser.add_argument("--max-steps", type=int, required=False, default=None,
                        help="Stop after this many ticks (default: play until lost)")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Seed for food placement and the player")

    args = parser.parse_args()

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    player = RandomPlayer(rng=random.Random(args.seed))
    result = run_session(args.width, args.height, player, max_steps=args.max_steps, seed=args.seed)

    print("\nSession Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
