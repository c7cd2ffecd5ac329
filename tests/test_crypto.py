from __future__ import annotations

import pytest

from pydevinfo._crypto import AesPayloadCodec, PlainPayloadCodec, build_codec
from pydevinfo.config import DevinfoConfig
from pydevinfo.exceptions import DevinfoCryptoError

_KEY = "00112233445566778899AABBCCDDEEFF"


def test_aes_ciphertext_is_uppercase_hex_blocks() -> None:
    codec = AesPayloadCodec(_KEY)

    cipher_hex = codec.encode("send plugin sysinfo report myself")

    assert cipher_hex == cipher_hex.upper()
    assert len(bytes.fromhex(cipher_hex)) % 16 == 0
    assert codec.decode(cipher_hex) == "send plugin sysinfo report myself"


def test_same_codec_encodes_repeatedly() -> None:
    codec = AesPayloadCodec(_KEY)

    first = codec.encode("[devinfo] pi-1: false -> true")
    second = codec.encode("[devinfo] pi-1: false -> true")

    assert first == second
    assert codec.decode(second) == "[devinfo] pi-1: false -> true"


def test_key_accepts_0x_prefix() -> None:
    cipher_hex = AesPayloadCodec(_KEY).encode("hello")

    assert AesPayloadCodec(f"0x{_KEY}").decode(cipher_hex) == "hello"


def test_decode_with_wrong_key_raises_crypto_error() -> None:
    cipher_hex = AesPayloadCodec(_KEY).encode('{"name": "pi-1"}')

    with pytest.raises(DevinfoCryptoError, match="AES decryption failed"):
        AesPayloadCodec("FF" * 16).decode(cipher_hex)


@pytest.mark.parametrize("text", ["not hex", "ABCD"])
def test_decode_garbage_raises_crypto_error(text: str) -> None:
    with pytest.raises(DevinfoCryptoError, match="AES decryption failed"):
        AesPayloadCodec(_KEY).decode(text)


@pytest.mark.parametrize("key", ["", "abc", "zz" * 16, "00" * 15])
def test_invalid_key_rejected_at_codec_construction(key: str) -> None:
    with pytest.raises(DevinfoCryptoError, match="AES key"):
        AesPayloadCodec(key)


def test_build_codec_picks_plain_without_key() -> None:
    assert isinstance(build_codec(DevinfoConfig()), PlainPayloadCodec)
    assert isinstance(build_codec(DevinfoConfig(encryption_key=_KEY)), AesPayloadCodec)


def test_aes_codec_decode_tolerates_surrounding_whitespace() -> None:
    codec = AesPayloadCodec(_KEY)

    assert codec.decode(f"  {codec.encode('hello')}\n") == "hello"
