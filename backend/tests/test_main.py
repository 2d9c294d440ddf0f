"""
Tests for main.py - headless session runner.
"""

import sys
import os
import random
from unittest.mock import patch

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import UP, DOWN, LEFT, RIGHT, Game, Continue, LOSE
from players import Player, RandomPlayer
from services.channels import channel
from services.game_loop import Start
from main import run_session, main


class ScriptedPlayer(Player):
    """Returns moves from a fixed script, then keeps the last one."""

    def __init__(self, moves):
        super().__init__("scripted")
        self.moves = list(moves)
        self.calls = 0

    def get_move(self, board, last_direction):
        self.calls += 1
        if self.moves:
            return self.moves.pop(0)
        return last_direction


class TestRunSession:
    """Tests for run_session."""

    def test_stops_after_max_steps(self):
        """run_session() stops after max_steps ticks."""
        player = RandomPlayer(rng=random.Random(1))
        result = run_session(12, 12, player, max_steps=3, seed=1)

        assert result["result"] == "stopped"
        assert result["ticks"] == 3
        assert result["length"] >= 5

    def test_zero_steps_returns_initial_length(self):
        """With max_steps=0 only the initial board is read."""
        player = ScriptedPlayer([])
        result = run_session(12, 12, player, max_steps=0, seed=2)

        assert result == {"result": "stopped", "ticks": 0, "length": 5}
        assert player.calls == 0

    def test_plays_until_lost(self):
        """run_session() reports a loss when the snake hits itself."""
        # Right, Down, Left drives the head into its own body.
        player = ScriptedPlayer([RIGHT, DOWN, LEFT])
        result = run_session(12, 12, player, seed=3)

        assert result["result"] == "lost"
        assert result["ticks"] >= 3

    def test_closed_control_channel_still_reports_loss(self):
        """A loop that already lost and closed its channels still yields a summary."""
        board = Game(12, 12, rng=random.Random(4)).board()
        control_tx, control_rx = channel()
        step_tx, step_rx = channel()
        step_tx.send(Continue(board))
        step_tx.send(LOSE)
        step_tx.close()

        class LateMover(ScriptedPlayer):
            def get_move(self, board, last_direction):
                # By the time the move is ready the loop has lost and gone.
                control_rx.close()
                return super().get_move(board, last_direction)

        player = LateMover([LEFT])
        with patch("main.init", return_value=(control_tx, step_rx)):
            result = run_session(12, 12, player)

        assert result == {"result": "lost", "ticks": 1, "length": 5}
        assert player.calls == 1
        assert control_rx.drain() == [Start()]


class TestMain:
    """Tests for the command line entry point."""

    def test_main_prints_summary(self, capsys):
        """main() prints the JSON session summary."""
        argv = ["main.py", "--width", "10", "--height", "10", "--max-steps", "0", "--seed", "5"]
        with patch.object(sys, "argv", argv):
            main()

        out = capsys.readouterr().out
        assert "Session Summary" in out
        assert '"result": "stopped"' in out
