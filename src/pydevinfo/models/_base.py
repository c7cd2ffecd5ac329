"""Base model for device payloads.

Every inbound model inherits from :class:`DevinfoBaseModel` which
provides:

* ``alias_generator=to_camel`` so both ``sw_uptime`` and ``swUptime``
  map to the same field.
* Strict typing: a string is never coerced into a number and an
  integer is never coerced into a boolean.
* ``extra="ignore"`` so fields newer devices report do not break
  older registries.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DevinfoBaseModel(BaseModel):
    """Base for inbound device payload models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        strict=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )
