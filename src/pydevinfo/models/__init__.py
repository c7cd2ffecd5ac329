"""Device models."""

from pydevinfo.models.device import Device, UpdatePatch

__all__ = [
    "Device",
    "UpdatePatch",
]
