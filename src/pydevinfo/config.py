"""Service configuration for pydevinfo."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from typing import Any

from pydevinfo._constants import DEFAULT_TOPIC_TEMPLATE, HOUSEKEEPING_TIMEOUT
from pydevinfo.exceptions import DevinfoConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_int(env: Mapping[str, str], key: str) -> int | None:
    raw = env.get(key)
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise DevinfoConfigError(f"{key} must be an integer (got {raw!r})") from exc


@dataclasses.dataclass(frozen=True)
class DevinfoConfig:
    """Service configuration.

    Parameters
    ----------
    stale_after_seconds : int
        Seconds since the last update after which a device is rendered
        as stale in the status report.
    topic_template : str
        Per-device topic for re-report requests.  ``{name}`` is replaced
        with the device name.
    encryption_key : str or None
        Hex AES key used to encode outgoing log lines and requests.
        When ``None`` payloads are sent as plain text.
    color_enabled : bool
        Wrap status report fragments in ANSI colours.
    mqtt_host : str
        Broker host for the optional MQTT bridge.
    mqtt_port : int
        Broker port.
    mqtt_update_topic : str
        Topic the bridge subscribes to for device updates.
    mqtt_keepalive : int
        MQTT keepalive in seconds.
    """

    stale_after_seconds: int = HOUSEKEEPING_TIMEOUT
    topic_template: str = DEFAULT_TOPIC_TEMPLATE
    encryption_key: str | None = None
    color_enabled: bool = True
    mqtt_host: str = "localhost"
    mqtt_port: int = 1883
    mqtt_update_topic: str = "tln/devinfo/update"
    mqtt_keepalive: int = 60

    def __post_init__(self) -> None:
        if self.stale_after_seconds < 0:
            raise DevinfoConfigError("stale_after_seconds must be non-negative")
        if "{name}" not in self.topic_template:
            raise DevinfoConfigError("topic_template must contain '{name}'")

    def device_topic(self, name: str) -> str:
        """Return the re-report topic for device *name*."""
        return self.topic_template.replace("{name}", name)

    @classmethod
    def from_env(cls, **overrides: Any) -> DevinfoConfig:
        """Create configuration from ``DEVINFO_*`` environment variables.

        Explicit keyword arguments override environment values.  Setting
        ``NO_COLOR`` disables colour unless ``DEVINFO_COLOR`` says otherwise.

        Raises
        ------
        DevinfoConfigError
            If a numeric variable cannot be parsed.
        """
        env = os.environ

        _ENV_STR_MAP = {
            "DEVINFO_TOPIC_TEMPLATE": "topic_template",
            "DEVINFO_ENCRYPTION_KEY": "encryption_key",
            "DEVINFO_MQTT_HOST": "mqtt_host",
            "DEVINFO_MQTT_UPDATE_TOPIC": "mqtt_update_topic",
        }
        _ENV_INT_MAP = {
            "DEVINFO_STALE_AFTER": "stale_after_seconds",
            "DEVINFO_MQTT_PORT": "mqtt_port",
            "DEVINFO_MQTT_KEEPALIVE": "mqtt_keepalive",
        }

        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_STR_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = val

        for env_key, field_name in _ENV_INT_MAP.items():
            if field_name in overrides:
                continue
            parsed = _env_int(env, env_key)
            if parsed is not None:
                config_kwargs[field_name] = parsed

        if "color_enabled" not in overrides:
            color_default = env.get("NO_COLOR") is None
            config_kwargs["color_enabled"] = _env_bool(env.get("DEVINFO_COLOR"), color_default)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
