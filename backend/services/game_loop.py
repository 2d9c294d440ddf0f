"""
Real-time driver for the snake game.

The loop owns a Game on its own thread. It waits for a Start command, then
ticks the game at a fixed rate, always using the most recent Move received
since the previous tick, and publishes every GameStep on the outbound
channel. It stops when the game is lost or when either channel is closed.
"""

import logging
import random
import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from domain import INITIAL_DIRECTION, Continue, Direction, Game, GameStep
from services.channels import ChannelClosed, Receiver, Sender, channel


TICK_SECONDS = 0.2
POLL_SECONDS = 0.001

logger = logging.getLogger(__name__)


class GameControl:
    """Inbound command: Start or Move(direction)."""


@dataclass(frozen=True)
class Start(GameControl):
    pass


@dataclass(frozen=True)
class Move(GameControl):
    direction: Direction

    def __post_init__(self):
        # Accept "LEFT" as well as Direction.LEFT; reject anything else.
        object.__setattr__(self, "direction", Direction(self.direction))


class LoopState(Enum):
    AWAITING_START = "awaiting_start"
    RUNNING = "running"
    TERMINATED = "terminated"


class GameLoop:
    """
    Drives one game session.

    clock, sleep, tick_interval and poll_interval exist so tests can drive
    time by hand; production code always uses the module defaults.

    Attributes:
        width, height: board dimensions handed to the Game
        controls: receiver of GameControl messages
        steps: sender for GameStep messages
        state: current LoopState
    """

    def __init__(
        self,
        width: int,
        height: int,
        controls: Receiver,
        steps: Sender,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        tick_interval: float = TICK_SECONDS,
        poll_interval: float = POLL_SECONDS,
    ):
        self.width = width
        self.height = height
        self.controls = controls
        self.steps = steps
        self.rng = rng
        self.clock = clock
        self.sleep = sleep
        self.tick_interval = tick_interval
        self.poll_interval = poll_interval
        self.state = LoopState.AWAITING_START
        self.ticks = 0

    def start(self) -> threading.Thread:
        """Run the loop on a daemon thread and return the thread."""
        thread = threading.Thread(target=self.run, name="snake-game-loop", daemon=True)
        thread.start()
        return thread

    def run(self) -> None:
        """Block until the session ends. Closes both channels on exit."""
        try:
            self._await_start()
            self.state = LoopState.RUNNING
            game = Game(self.width, self.height, rng=self.rng)
            logger.info("Game started on a %dx%d board", self.width, self.height)
            self._tick_loop(game)
        except ChannelClosed:
            logger.info("Channel closed after %d ticks, stopping game loop", self.ticks)
        finally:
            self.state = LoopState.TERMINATED
            self.controls.close()
            self.steps.close()

    def _await_start(self) -> None:
        # Anything before Start, including Move, is discarded.
        while True:
            message = self.controls.recv()
            if isinstance(message, Start):
                return
            logger.debug("Ignoring %r before start", message)

    def _tick_loop(self, game: Game) -> None:
        last_tick = self.clock()
        active_direction = INITIAL_DIRECTION
        self._publish(Continue(game.board()))

        while True:
            for message in self.controls.drain():
                if isinstance(message, Move):
                    active_direction = message.direction

            if self.clock() - last_tick >= self.tick_interval:
                step = game.step(active_direction)
                self.ticks += 1
                self._publish(step)
                if step.lost:
                    logger.info("Game lost after %d ticks (length %d)", self.ticks, len(game.snake))
                    return
                # Advance by one interval, not to now, so late ticks catch up.
                last_tick += self.tick_interval

            self.sleep(self.poll_interval)

    def _publish(self, step: GameStep) -> None:
        if isinstance(step, Continue) and logger.isEnabledFor(logging.DEBUG):
            logger.debug("Tick %d\n%s", self.ticks, step.board.print_board())
        self.steps.send(step)


def init(
    width: int,
    height: int,
    rng: Optional[random.Random] = None,
) -> Tuple[Sender, Receiver]:
    """
    Start a game loop thread and return (control_sender, step_receiver).

    The loop always ticks every TICK_SECONDS; rng only seeds food placement.
    """
    control_tx, control_rx = channel()
    step_tx, step_rx = channel()
    GameLoop(width, height, control_rx, step_tx, rng=rng).start()
    return control_tx, step_rx
