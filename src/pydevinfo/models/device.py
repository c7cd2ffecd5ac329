"""Device record and sparse update patch models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from pydevinfo._constants import NOT_AVAILABLE
from pydevinfo.models._base import DevinfoBaseModel


class UpdatePatch(DevinfoBaseModel):
    """Sparse set of field updates for one device.

    Only ``name`` is required.  A field left unset (or sent as ``null``)
    never overwrites the stored value.
    """

    name: str
    onboard: bool | None = None
    uptime: NonNegativeInt | None = None
    hostname: str | None = None
    os: str | None = None
    temperature: float | None = None
    sw_uptime: NonNegativeInt | None = None

    def changes(self) -> dict[str, Any]:
        """Return the present fields other than ``name``."""
        return self.model_dump(exclude={"name"}, exclude_none=True)


class Device(BaseModel):
    """Last known status of one device, keyed by ``name``."""

    model_config = ConfigDict(extra="forbid")

    name: str
    onboard: bool = True
    uptime: int = 0
    hostname: str = NOT_AVAILABLE
    os: str = NOT_AVAILABLE
    temperature: float = 0.0
    sw_uptime: int = 0
    last_update: int = Field(default=0, description="Epoch seconds of the last accepted patch")

    @classmethod
    def from_patch(cls, patch: UpdatePatch, now: int) -> Device:
        """Create a device from its first patch, defaulting absent fields."""
        return cls(name=patch.name, last_update=now, **patch.changes())
