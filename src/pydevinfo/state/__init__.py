"""Device state."""

from pydevinfo.state.registry import DeviceRegistry, LockedDeviceRegistry, OnboardTransition, UpdateResult

__all__ = [
    "DeviceRegistry",
    "LockedDeviceRegistry",
    "OnboardTransition",
    "UpdateResult",
]
