from __future__ import annotations

import pytest

from pydevinfo.exceptions import DevinfoDecodeError
from pydevinfo.ingestion.decode import decode_update


def test_decode_full_payload() -> None:
    patch = decode_update(
        '{"name": "pi-1", "onboard": true, "uptime": 3600, "hostname": "alpha",'
        ' "os": "Linux", "temperature": 48.5, "sw_uptime": 120}'
    )

    assert patch.name == "pi-1"
    assert patch.onboard is True
    assert patch.uptime == 3600
    assert patch.hostname == "alpha"
    assert patch.os == "Linux"
    assert patch.temperature == 48.5
    assert patch.sw_uptime == 120


def test_decode_accepts_camel_case_sw_uptime() -> None:
    assert decode_update('{"name": "pi-1", "swUptime": 9}').sw_uptime == 9


def test_decode_only_name_leaves_everything_else_absent() -> None:
    patch = decode_update('{"name": "pi-1"}')

    assert patch.changes() == {}


def test_decode_null_field_counts_as_absent() -> None:
    patch = decode_update('{"name": "pi-1", "hostname": null, "uptime": 5}')

    assert patch.changes() == {"uptime": 5}


def test_decode_ignores_unknown_fields() -> None:
    patch = decode_update('{"name": "pi-1", "firmware": "1.2.3"}')

    assert patch.name == "pi-1"


def test_decode_accepts_integer_temperature_and_out_of_range_values() -> None:
    assert decode_update('{"name": "pi-1", "temperature": 70}').temperature == 70.0
    assert decode_update('{"name": "pi-1", "temperature": -300}').temperature == -300.0


def test_decode_bytes_payload() -> None:
    assert decode_update(b'{"name": "pi-1"}').name == "pi-1"


@pytest.mark.parametrize(
    "payload",
    [
        '{"onboard": true}',
        '{"name": null}',
        '{"name": 5}',
        '{"name": "pi-1", "onboard": "yes"}',
        '{"name": "pi-1", "onboard": 1}',
        '{"name": "pi-1", "uptime": "10"}',
        '{"name": "pi-1", "uptime": -1}',
        '{"name": "pi-1", "uptime": 1.5}',
        '{"name": "pi-1", "temperature": "hot"}',
        '["pi-1"]',
        "not json",
        "",
    ],
)
def test_decode_malformed_payload_raises(payload: str) -> None:
    with pytest.raises(DevinfoDecodeError, match="Malformed update payload") as excinfo:
        decode_update(payload)

    assert excinfo.value.payload == payload
