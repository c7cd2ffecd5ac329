"""In-memory device registry.

This is the only component allowed to merge incoming update patches.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Protocol

from pydevinfo.models.device import Device, UpdatePatch


@dataclass(frozen=True)
class OnboardTransition:
    """Change of a device's onboard flag between two observations."""

    prev: bool
    curr: bool


@dataclass(frozen=True)
class UpdateResult:
    """Outcome of :meth:`DeviceRegistry.apply_update`."""

    created: bool
    transition: OnboardTransition | None = None


class DeviceRegistry(Protocol):
    """Merge contract shared by every registry implementation."""

    def apply_update(self, patch: UpdatePatch, now: int) -> UpdateResult: ...

    def list_devices(self) -> list[Device]: ...

    def find_by_name(self, name: str) -> Device | None: ...


class LockedDeviceRegistry:
    """Registry guarded by a single lock.

    The lookup and the merge of one patch happen under the same lock, so
    two concurrent patches for the same device cannot lose an update.
    Readers get copies, never the live records.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        # dicts keep insertion order, which is registration order here
        self._devices: dict[str, Device] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._devices)

    def apply_update(self, patch: UpdatePatch, now: int) -> UpdateResult:
        """Apply a sparse patch for ``patch.name`` observed at *now*."""
        with self._lock:
            device = self._devices.get(patch.name)
            if device is None:
                return self._create(patch, now)

            transition: OnboardTransition | None = None
            if patch.onboard is not None and patch.onboard != device.onboard:
                transition = OnboardTransition(prev=device.onboard, curr=patch.onboard)

            for field_name, value in patch.changes().items():
                setattr(device, field_name, value)
            device.last_update = now
            return UpdateResult(created=False, transition=transition)

    def _create(self, patch: UpdatePatch, now: int) -> UpdateResult:
        # A brand-new device announcing itself onboard counts as coming online.
        transition = OnboardTransition(prev=False, curr=True) if patch.onboard is True else None
        self._devices[patch.name] = Device.from_patch(patch, now)
        return UpdateResult(created=True, transition=transition)

    def list_devices(self) -> list[Device]:
        """Return a snapshot of all devices in registration order."""
        with self._lock:
            return [device.model_copy() for device in self._devices.values()]

    def find_by_name(self, name: str) -> Device | None:
        with self._lock:
            device = self._devices.get(name)
            return device.model_copy() if device is not None else None
