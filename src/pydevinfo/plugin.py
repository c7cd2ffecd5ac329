"""Host-facing devinfo service object."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from pydevinfo._constants import MODULE, SHOW
from pydevinfo._crypto import PayloadCodec, build_codec
from pydevinfo._style import Styler
from pydevinfo.channel import OutboundChannel, QueueChannel
from pydevinfo.config import DevinfoConfig
from pydevinfo.dispatcher import ActionDispatcher
from pydevinfo.report import StatusReporter
from pydevinfo.state.registry import LockedDeviceRegistry

_logger = logging.getLogger(__name__)

Clock = Callable[[], int]


def _epoch_seconds() -> int:
    return int(time.time())


class DevinfoPlugin:
    """Device status registry exposed through the host action interface.

    Usage::

        plugin = DevinfoPlugin(channel=QueueChannel())
        plugin.action("update", '{"name": "pi-1", "onboard": true}')
        print(plugin.status())
        plugin.shutdown()
    """

    name = MODULE

    def __init__(
        self,
        *,
        channel: OutboundChannel | None = None,
        config: DevinfoConfig | None = None,
        codec: PayloadCodec | None = None,
        clock: Clock = _epoch_seconds,
    ) -> None:
        self._config = config or DevinfoConfig()
        self._owned_channel: QueueChannel | None = None
        if channel is None:
            self._owned_channel = channel = QueueChannel()
        self._channel: OutboundChannel = channel
        self._clock = clock
        self._registry = LockedDeviceRegistry()
        self._dispatcher = ActionDispatcher(
            registry=self._registry,
            channel=self._channel,
            clock=clock,
            codec=codec or build_codec(self._config),
            config=self._config,
        )
        self._reporter = StatusReporter(
            self._registry,
            stale_after_seconds=self._config.stale_after_seconds,
            styler=Styler(enabled=self._config.color_enabled),
        )
        _logger.info("[%s] Loading...", MODULE)

    @property
    def registry(self) -> LockedDeviceRegistry:
        return self._registry

    @property
    def channel(self) -> OutboundChannel:
        return self._channel

    def show(self) -> str:
        """Static help text for the supported actions."""
        return SHOW

    def status(self) -> str:
        """Status report for every known device at the current time."""
        return self._reporter.render(self._clock())

    def action(self, action: str, data: str, data2: str = "") -> str:
        """Entry point for ``action plugin devinfo <action> <data>``.

        *data2* is accepted for interface compatibility and ignored.
        """
        return self._dispatcher.dispatch(action, data)

    def shutdown(self) -> None:
        """Close the outbound channel if this plugin created it."""
        if self._owned_channel is not None:
            self._owned_channel.close()
        _logger.info("[%s] Unloaded", MODULE)
