"""Custom exception hierarchy for pydevinfo."""

from __future__ import annotations


class DevinfoError(Exception):
    """Base exception for all pydevinfo errors."""


class DevinfoConfigError(DevinfoError):
    """Invalid or missing configuration."""


class DevinfoCryptoError(DevinfoError):
    """Payload encryption or decryption failure."""


class DevinfoDecodeError(DevinfoError):
    """Update payload could not be parsed into a patch.

    Raised for non-JSON input, non-object JSON, a missing ``name`` or a
    field of the wrong type.  The registry is left untouched.
    """

    def __init__(self, message: str, *, payload: str = "") -> None:
        self.payload = payload
        super().__init__(message)


class DevinfoChannelClosedError(DevinfoError):
    """Outbound channel no longer accepts commands."""
