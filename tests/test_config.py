from __future__ import annotations

import pytest

from pydevinfo.config import DevinfoConfig
from pydevinfo.exceptions import DevinfoConfigError

_ENV_KEYS = (
    "DEVINFO_STALE_AFTER",
    "DEVINFO_TOPIC_TEMPLATE",
    "DEVINFO_ENCRYPTION_KEY",
    "DEVINFO_COLOR",
    "DEVINFO_MQTT_HOST",
    "DEVINFO_MQTT_PORT",
    "DEVINFO_MQTT_UPDATE_TOPIC",
    "DEVINFO_MQTT_KEEPALIVE",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    config = DevinfoConfig.from_env()

    assert config.stale_after_seconds == 300
    assert config.topic_template == "tln/{name}/send"
    assert config.encryption_key is None
    assert config.color_enabled is True
    assert config.device_topic("pi-1") == "tln/pi-1/send"


def test_env_values_are_read(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEVINFO_STALE_AFTER", "120")
    monkeypatch.setenv("DEVINFO_TOPIC_TEMPLATE", "lab/{name}/in")
    monkeypatch.setenv("DEVINFO_MQTT_HOST", "broker.local")
    monkeypatch.setenv("DEVINFO_MQTT_PORT", "8883")
    monkeypatch.setenv("DEVINFO_COLOR", "off")

    config = DevinfoConfig.from_env()

    assert config.stale_after_seconds == 120
    assert config.device_topic("pi-1") == "lab/pi-1/in"
    assert config.mqtt_host == "broker.local"
    assert config.mqtt_port == 8883
    assert config.color_enabled is False


def test_no_color_disables_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")

    assert DevinfoConfig.from_env().color_enabled is False


def test_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEVINFO_STALE_AFTER", "120")
    monkeypatch.setenv("DEVINFO_MQTT_PORT", "not-a-port")

    config = DevinfoConfig.from_env(stale_after_seconds=60, mqtt_port=1884)

    assert config.stale_after_seconds == 60
    assert config.mqtt_port == 1884


def test_non_numeric_env_value_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEVINFO_STALE_AFTER", "five minutes")

    with pytest.raises(DevinfoConfigError, match="DEVINFO_STALE_AFTER"):
        DevinfoConfig.from_env()


def test_topic_template_requires_name_placeholder() -> None:
    with pytest.raises(DevinfoConfigError, match="topic_template"):
        DevinfoConfig(topic_template="tln/send")


def test_negative_stale_threshold_rejected() -> None:
    with pytest.raises(DevinfoConfigError):
        DevinfoConfig(stale_after_seconds=-1)
