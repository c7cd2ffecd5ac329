"""Payload codecs for strings handed to the outbound channel."""

from __future__ import annotations

from typing import Protocol

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from pydevinfo.config import DevinfoConfig
from pydevinfo.exceptions import DevinfoCryptoError

_ZERO_IV = b"\x00" * 16
_KEY_SIZES = frozenset({16, 24, 32})


class PayloadCodec(Protocol):
    """Protocol for encoding outgoing and decoding incoming payload strings."""

    def encode(self, text: str) -> str: ...

    def decode(self, text: str) -> str: ...


class PlainPayloadCodec:
    """Identity codec used when no encryption key is configured."""

    def encode(self, text: str) -> str:
        return text

    def decode(self, text: str) -> str:
        return text


class AesPayloadCodec:
    """AES-CBC with a zero IV and PKCS7 padding, as uppercase hex.

    The key is validated once here, so a bad ``DEVINFO_ENCRYPTION_KEY``
    fails at startup instead of on the first dispatch.
    """

    def __init__(self, key_hex: str) -> None:
        text = key_hex.strip().removeprefix("0x").removeprefix("0X")
        try:
            key = bytes.fromhex(text)
        except ValueError as exc:
            raise DevinfoCryptoError("AES key must be hex-encoded") from exc
        if len(key) not in _KEY_SIZES:
            raise DevinfoCryptoError(f"AES key must be 16, 24 or 32 bytes (got {len(key)})")
        self._cipher = Cipher(algorithms.AES(key), modes.CBC(_ZERO_IV))

    def encode(self, text: str) -> str:
        padder = padding.PKCS7(128).padder()
        padded = padder.update(text.encode("utf-8")) + padder.finalize()
        encryptor = self._cipher.encryptor()
        return (encryptor.update(padded) + encryptor.finalize()).hex().upper()

    def decode(self, text: str) -> str:
        """Decrypt hex ciphertext; surrounding whitespace is ignored.

        Raises
        ------
        DevinfoCryptoError
            If *text* is not hex, not block aligned, or the key is wrong.
        """
        try:
            ct = bytes.fromhex(text.strip())
            decryptor = self._cipher.decryptor()
            padded = decryptor.update(ct) + decryptor.finalize()
            unpadder = padding.PKCS7(128).unpadder()
            return (unpadder.update(padded) + unpadder.finalize()).decode("utf-8")
        except ValueError as exc:
            # UnicodeDecodeError is a ValueError too.
            raise DevinfoCryptoError(f"AES decryption failed: {exc}") from exc


def build_codec(config: DevinfoConfig) -> PayloadCodec:
    """Pick the codec matching *config*."""
    if config.encryption_key:
        return AesPayloadCodec(config.encryption_key)
    return PlainPayloadCodec()


__all__ = [
    "AesPayloadCodec",
    "PayloadCodec",
    "PlainPayloadCodec",
    "build_codec",
]
