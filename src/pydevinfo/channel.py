"""Outbound command channel.

Commands are opaque strings (``record log '...'``, ``publish report ...``)
consumed by other subsystems of the host.
"""

from __future__ import annotations

import queue
import threading
from typing import Protocol

from pydevinfo.exceptions import DevinfoChannelClosedError


class OutboundChannel(Protocol):
    """Anything that accepts outbound command strings."""

    def send(self, command: str) -> None: ...


class QueueChannel:
    """Unbounded FIFO channel backed by :class:`queue.SimpleQueue`.

    ``send`` never blocks.  Once closed, ``send`` raises
    :class:`DevinfoChannelClosedError`; commands already queued can still
    be received.
    """

    def __init__(self) -> None:
        self._queue: queue.SimpleQueue[str] = queue.SimpleQueue()
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def send(self, command: str) -> None:
        if self._closed.is_set():
            raise DevinfoChannelClosedError("Outbound channel is closed")
        self._queue.put(command)

    def receive(self, timeout: float | None = None) -> str:
        """Block until a command is available.

        Raises
        ------
        queue.Empty
            If *timeout* expires first.
        """
        return self._queue.get(timeout=timeout)

    def drain(self) -> list[str]:
        """Return every queued command without blocking."""
        commands: list[str] = []
        while True:
            try:
                commands.append(self._queue.get_nowait())
            except queue.Empty:
                return commands

    def close(self) -> None:
        self._closed.set()
