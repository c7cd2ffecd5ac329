"""Update payload decoding.

Structural parsing only: a temperature of -300 is a valid reading here.
"""

from __future__ import annotations

from pydantic import ValidationError

from pydevinfo.exceptions import DevinfoDecodeError
from pydevinfo.models.device import UpdatePatch


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(item) for item in error["loc"]) or "<payload>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def decode_update(payload: str | bytes) -> UpdatePatch:
    """Parse a JSON update payload into an :class:`UpdatePatch`.

    Raises
    ------
    DevinfoDecodeError
        If the payload is not a JSON object, lacks ``name``, or carries a
        field of the wrong type.
    """
    text = payload.decode("utf-8", errors="replace") if isinstance(payload, bytes) else payload
    try:
        return UpdatePatch.model_validate_json(text)
    except ValidationError as exc:
        raise DevinfoDecodeError(f"Malformed update payload: {_describe(exc)}", payload=text) from exc
