from __future__ import annotations

import queue

import pytest

from pydevinfo.channel import QueueChannel
from pydevinfo.exceptions import DevinfoChannelClosedError


def test_commands_are_received_in_order() -> None:
    channel = QueueChannel()
    channel.send("one")
    channel.send("two")

    assert channel.receive(timeout=0.1) == "one"
    assert channel.drain() == ["two"]
    assert channel.drain() == []


def test_receive_times_out_when_empty() -> None:
    with pytest.raises(queue.Empty):
        QueueChannel().receive(timeout=0.01)


def test_closed_channel_rejects_send_but_keeps_queued_commands() -> None:
    channel = QueueChannel()
    channel.send("queued")
    channel.close()

    with pytest.raises(DevinfoChannelClosedError):
        channel.send("late")
    assert channel.closed
    assert channel.drain() == ["queued"]
