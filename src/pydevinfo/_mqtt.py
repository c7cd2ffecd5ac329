"""Optional MQTT bridge between a broker and a :class:`DevinfoPlugin`.

Inbound messages on the update topic become ``update`` actions; outbound
``publish report`` commands taken from the channel are published to the
broker.  Other commands are handed back to the caller.
"""

from __future__ import annotations

import logging
import re
import secrets
from collections.abc import Callable
from typing import Any, Protocol, cast

import paho.mqtt.client as mqtt

from pydevinfo._crypto import PayloadCodec, PlainPayloadCodec
from pydevinfo.channel import QueueChannel
from pydevinfo.config import DevinfoConfig
from pydevinfo.exceptions import DevinfoError

_PUBLISH_RE = re.compile(r"^publish report topic='(?P<topic>.*?)' payload='(?P<payload>[^']*)'$")


class _ActionTarget(Protocol):
    def action(self, action: str, data: str, data2: str = "") -> str: ...


def parse_publish_command(command: str) -> tuple[str, str] | None:
    """Split a ``publish report`` command into ``(topic, payload)``."""
    match = _PUBLISH_RE.match(command.strip())
    if match is None:
        return None
    return match.group("topic"), match.group("payload")


def _default_client_factory(client_id: str) -> mqtt.Client:
    return mqtt.Client(
        callback_api_version=cast(Any, mqtt).CallbackAPIVersion.VERSION2,
        client_id=client_id,
    )


class DevinfoMqttBridge:
    """Threaded paho-mqtt runtime feeding a devinfo plugin."""

    def __init__(
        self,
        target: _ActionTarget,
        *,
        config: DevinfoConfig | None = None,
        codec: PayloadCodec | None = None,
        client_factory: Callable[[str], mqtt.Client] = _default_client_factory,
        logger: logging.Logger | None = None,
    ) -> None:
        self._target = target
        self._config = config or DevinfoConfig()
        self._codec = codec or PlainPayloadCodec()
        self._client_factory = client_factory
        self._logger = logger or logging.getLogger(__name__)
        self._client: mqtt.Client | None = None
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def handle_message(self, topic: str, payload: bytes) -> bool:
        """Apply one inbound update message.

        Returns ``False`` when the message was rejected; the error is
        logged rather than raised into the network thread.
        """
        try:
            text = self._codec.decode(payload.decode("utf-8", errors="replace"))
            self._target.action("update", text)
        except DevinfoError as exc:
            self._logger.warning("Dropped update from topic=%s: %s", topic, exc)
            return False
        return True

    def forward(self, command: str) -> bool:
        """Publish a ``publish report`` command; other commands are skipped.

        Raises
        ------
        DevinfoError
            If the bridge is not running, or the client rejects the topic
            (empty, or containing ``+``/``#`` wildcards).
        """
        parsed = parse_publish_command(command)
        if parsed is None:
            return False
        if self._client is None or not self._running:
            raise DevinfoError("MQTT bridge is not running")
        topic, payload = parsed
        self._logger.debug("MQTT publish topic=%s", topic)
        try:
            self._client.publish(topic, payload, qos=0)
        except ValueError as exc:
            raise DevinfoError(f"Cannot publish to topic {topic!r}: {exc}") from exc
        return True

    def forward_pending(self, channel: QueueChannel) -> list[str]:
        """Forward every queued publish command.

        Returns the drained commands that were not publish commands, in
        order, so the caller can hand them to other consumers.
        """
        if not self._running:
            raise DevinfoError("MQTT bridge is not running")
        return [command for command in channel.drain() if not self.forward(command)]

    def start(self) -> None:
        """Connect and subscribe to the configured update topic."""
        self.stop()
        config = self._config
        client_id = f"devinfo_{secrets.token_hex(4)}"
        self._logger.debug(
            "MQTT bridge start host=%s port=%s topic=%s client_id=%s",
            config.mqtt_host,
            config.mqtt_port,
            config.mqtt_update_topic,
            client_id,
        )
        client = self._client_factory(client_id)

        def on_connect(c: mqtt.Client, _userdata: Any, _flags: Any, reason_code: Any, _properties: Any) -> None:
            if reason_code.value != 0:
                self._logger.warning("MQTT connect failed: %s", reason_code)
                return
            self._logger.debug("MQTT subscribing topic=%s", config.mqtt_update_topic)
            c.subscribe(config.mqtt_update_topic, qos=0)

        def on_message(_c: mqtt.Client, _userdata: Any, msg: mqtt.MQTTMessage) -> None:
            self.handle_message(msg.topic, msg.payload)

        client.on_connect = on_connect
        client.on_message = on_message

        client.connect(config.mqtt_host, config.mqtt_port, keepalive=config.mqtt_keepalive)
        client.loop_start()

        self._client = client
        self._running = True

    def stop(self) -> None:
        """Disconnect and stop the network loop if running."""
        client = self._client
        self._client = None
        was_running = self._running
        self._running = False
        if client is None:
            return
        try:
            if was_running:
                client.disconnect()
        finally:
            client.loop_stop()
            self._logger.debug("MQTT network loop stopped")
