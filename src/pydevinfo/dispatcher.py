"""Action routing between the host, the registry and the outbound channel."""

from __future__ import annotations

import logging
from collections.abc import Callable

from pydevinfo._constants import ACK, LOG_COMMAND, MODULE, PUBLISH_COMMAND, REFRESH_ALL, SYSINFO_REQUEST
from pydevinfo._crypto import PayloadCodec, PlainPayloadCodec
from pydevinfo.channel import OutboundChannel
from pydevinfo.config import DevinfoConfig
from pydevinfo.exceptions import DevinfoDecodeError
from pydevinfo.ingestion.decode import decode_update
from pydevinfo.state.registry import DeviceRegistry, OnboardTransition

_logger = logging.getLogger(__name__)


def format_transition(name: str, transition: OnboardTransition) -> str:
    """Human-readable log line for an onboard transition."""
    prev = str(transition.prev).lower()
    curr = str(transition.curr).lower()
    return f"[{MODULE}] {name}: {prev} -> {curr}"


class ActionDispatcher:
    """Route ``update`` and ``refresh`` actions.

    Every recognised action is processed to completion before
    :meth:`dispatch` returns; the return value is always :data:`ACK`.
    """

    def __init__(
        self,
        *,
        registry: DeviceRegistry,
        channel: OutboundChannel,
        clock: Callable[[], int],
        codec: PayloadCodec | None = None,
        config: DevinfoConfig | None = None,
    ) -> None:
        self._registry = registry
        self._channel = channel
        self._clock = clock
        self._codec = codec or PlainPayloadCodec()
        self._config = config or DevinfoConfig()

    def dispatch(self, action: str, payload: str) -> str:
        """Handle one action.

        Raises
        ------
        DevinfoDecodeError
            If an ``update`` payload is malformed.  Nothing is applied.
        DevinfoChannelClosedError
            If a command could not be enqueued.
        """
        if action == "update":
            self._update(payload)
        elif action == "refresh":
            self._refresh(payload)
        else:
            _logger.debug("Ignoring unknown action=%s", action)
        return ACK

    def _update(self, payload: str) -> None:
        try:
            patch = decode_update(payload)
        except DevinfoDecodeError as exc:
            _logger.warning("Rejected update: %s", exc)
            raise

        result = self._registry.apply_update(patch, self._clock())
        if result.created:
            _logger.debug("Registered device name=%s", patch.name)
        if result.transition is not None:
            self._record_transition(patch.name, result.transition)

    def _record_transition(self, name: str, transition: OnboardTransition) -> None:
        line = format_transition(name, transition)
        _logger.info("%s", line)
        self._channel.send(LOG_COMMAND.format(payload=self._codec.encode(line)))

    def _refresh(self, payload: str) -> None:
        if payload != REFRESH_ALL:
            _logger.debug("Ignoring refresh payload=%s", payload)
            return

        devices = self._registry.list_devices()
        for device in devices:
            topic = self._config.device_topic(device.name)
            _logger.debug("Requesting sysinfo topic=%s", topic)
            self._channel.send(PUBLISH_COMMAND.format(topic=topic, payload=self._codec.encode(SYSINFO_REQUEST)))
        _logger.debug("Requested sysinfo from %d devices", len(devices))
