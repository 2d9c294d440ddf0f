"""
Tests for services/channels.py - message channels between threads.
"""

import pytest
import queue
import sys
import os
import threading

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.channels import ChannelClosed, channel


class TestChannel:
    """Tests for sending and receiving."""

    def test_items_arrive_in_order(self):
        """Items are received in the order they were sent."""
        tx, rx = channel()
        for item in range(3):
            tx.send(item)
        assert [rx.recv(), rx.recv(), rx.recv()] == [0, 1, 2]

    def test_try_recv_on_empty_raises_empty(self):
        """try_recv() on an empty channel raises queue.Empty."""
        _, rx = channel()
        with pytest.raises(queue.Empty):
            rx.try_recv()

    def test_recv_timeout_raises_empty(self):
        """recv() with a timeout raises queue.Empty when nothing arrives."""
        _, rx = channel()
        with pytest.raises(queue.Empty):
            rx.recv(timeout=0.01)

    def test_drain_takes_everything_pending(self):
        """drain() returns every pending item and leaves the channel empty."""
        tx, rx = channel()
        tx.send("a")
        tx.send("b")
        assert rx.drain() == ["a", "b"]
        assert rx.drain() == []

    def test_recv_blocks_until_send(self):
        """recv() blocks until another thread sends."""
        tx, rx = channel()
        timer = threading.Timer(0.05, tx.send, args=("late",))
        timer.start()
        try:
            assert rx.recv(timeout=2) == "late"
        finally:
            timer.cancel()


class TestChannelClose:
    """Tests for disconnection from either end."""

    def test_send_after_receiver_close_raises(self):
        """Sending after the receiver closed raises ChannelClosed."""
        tx, rx = channel()
        rx.close()
        assert tx.closed
        with pytest.raises(ChannelClosed):
            tx.send(1)

    def test_queued_items_survive_sender_close(self):
        """Items queued before the sender closed are still delivered."""
        tx, rx = channel()
        tx.send(1)
        tx.send(2)
        tx.close()
        assert rx.recv() == 1
        assert rx.try_recv() == 2
        with pytest.raises(ChannelClosed):
            rx.recv()
        with pytest.raises(ChannelClosed):
            rx.try_recv()

    def test_drain_returns_items_then_raises(self):
        """drain() hands back the last items, then reports the close."""
        tx, rx = channel()
        tx.send("x")
        tx.close()
        assert rx.drain() == ["x"]
        with pytest.raises(ChannelClosed):
            rx.drain()

    def test_iteration_stops_on_close(self):
        """Iterating a receiver ends once the channel is closed."""
        tx, rx = channel()
        tx.send(1)
        tx.send(2)
        tx.close()
        assert list(rx) == [1, 2]

    def test_close_is_idempotent(self):
        """Closing from both ends is harmless."""
        tx, rx = channel()
        tx.close()
        rx.close()
        assert list(rx) == []

    def test_close_wakes_blocked_receiver(self):
        """A receiver blocked in recv() wakes up when the channel closes."""
        tx, rx = channel()
        timer = threading.Timer(0.05, tx.close)
        timer.start()
        try:
            with pytest.raises(ChannelClosed):
                rx.recv(timeout=2)
        finally:
            timer.cancel()
