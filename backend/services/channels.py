"""
Unidirectional message channels between the game loop and its clients.

A channel is an unbounded FIFO queue with a shared sender and receiver.
Either end may close it; after that sends fail with ChannelClosed and the
receiver sees whatever was queued before the close, then ChannelClosed.
"""

import queue
import threading
from typing import Any, Iterator, List, Optional, Tuple


class ChannelClosed(Exception):
    """Raised when the other end of a channel has gone away."""


_CLOSED = object()


class Channel:
    def __init__(self):
        self._queue: "queue.Queue[Any]" = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, item: Any) -> None:
        with self._lock:
            if self._closed:
                raise ChannelClosed("channel is closed")
            self._queue.put(item)

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(_CLOSED)

    def recv(self, timeout: Optional[float] = None) -> Any:
        """
        Block until an item is available.

        Raises queue.Empty if the timeout expires first.
        """
        return self._unwrap(self._queue.get(timeout=timeout))

    def try_recv(self) -> Any:
        """Return the next item without blocking; raises queue.Empty if none."""
        return self._unwrap(self._queue.get_nowait())

    def _unwrap(self, item: Any) -> Any:
        if item is _CLOSED:
            # Leave the marker in place for any later reads.
            self._queue.put(_CLOSED)
            raise ChannelClosed("channel is closed")
        return item


class Sender:
    """Producing end of a channel."""

    def __init__(self, channel: Channel):
        self._channel = channel

    def send(self, item: Any) -> None:
        self._channel.send(item)

    def close(self) -> None:
        self._channel.close()

    @property
    def closed(self) -> bool:
        return self._channel.closed


class Receiver:
    """Consuming end of a channel."""

    def __init__(self, channel: Channel):
        self._channel = channel

    def recv(self, timeout: Optional[float] = None) -> Any:
        return self._channel.recv(timeout)

    def try_recv(self) -> Any:
        return self._channel.try_recv()

    def drain(self) -> List[Any]:
        """
        Take every item queued right now without blocking.

        Raises ChannelClosed if the channel is closed and nothing is left.
        """
        items = []
        while True:
            try:
                items.append(self._channel.try_recv())
            except queue.Empty:
                return items
            except ChannelClosed:
                if items:
                    return items
                raise

    def close(self) -> None:
        self._channel.close()

    @property
    def closed(self) -> bool:
        return self._channel.closed

    def __iter__(self) -> Iterator[Any]:
        """Yield items as they arrive until the channel is closed."""
        while True:
            try:
                yield self._channel.recv()
            except ChannelClosed:
                return


def channel() -> Tuple[Sender, Receiver]:
    shared = Channel()
    return Sender(shared), Receiver(shared)
