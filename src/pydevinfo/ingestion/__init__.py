"""Ingestion layer.

Adapters that turn raw update payloads into validated patches.
"""

from pydevinfo.ingestion.decode import decode_update

__all__ = ["decode_update"]
