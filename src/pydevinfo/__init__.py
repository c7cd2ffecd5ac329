"""pydevinfo - Live registry of remote device status reports."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pydevinfo")
except PackageNotFoundError:
    __version__ = "0+local"

from pydevinfo._mqtt import DevinfoMqttBridge
from pydevinfo.channel import OutboundChannel, QueueChannel
from pydevinfo.config import DevinfoConfig
from pydevinfo.dispatcher import ActionDispatcher
from pydevinfo.exceptions import (
    DevinfoChannelClosedError,
    DevinfoConfigError,
    DevinfoCryptoError,
    DevinfoDecodeError,
    DevinfoError,
)
from pydevinfo.ingestion.decode import decode_update
from pydevinfo.models import Device, UpdatePatch
from pydevinfo.plugin import DevinfoPlugin
from pydevinfo.report import Staleness, StatusReporter, TemperatureBand
from pydevinfo.state.registry import DeviceRegistry, LockedDeviceRegistry, OnboardTransition, UpdateResult

__all__ = [
    "__version__",
    "ActionDispatcher",
    "Device",
    "DeviceRegistry",
    "DevinfoChannelClosedError",
    "DevinfoConfig",
    "DevinfoConfigError",
    "DevinfoCryptoError",
    "DevinfoDecodeError",
    "DevinfoError",
    "DevinfoMqttBridge",
    "DevinfoPlugin",
    "LockedDeviceRegistry",
    "OnboardTransition",
    "OutboundChannel",
    "QueueChannel",
    "Staleness",
    "StatusReporter",
    "TemperatureBand",
    "UpdatePatch",
    "UpdateResult",
    "decode_update",
]
