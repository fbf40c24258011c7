"""
typeid_sdk.tier0_core.uuid7
────────────────────────────
Time-ordered UUID v7 generation and conversion between the 16-byte binary
form and the canonical lowercase hyphenated hex text (8-4-4-4-12).

Layout: 48-bit unix_ts_ms | version(7) | 12-bit rand_a | variant(10) | 62-bit rand_b

Two values generated within the same millisecond differ only in their random
bits and are NOT ordered relative to each other. Sort order is guaranteed at
millisecond granularity only.
"""
from __future__ import annotations

import os
import re
import uuid

from typeid_sdk.tier0_core.errors import TypeIDParseError
from typeid_sdk.tier0_core.result import Result, err, ok
from typeid_sdk.tier1_runtime import clock

MAX_TIMESTAMP_MS = (1 << 48) - 1
TEXT_LENGTH = 36

_UUID_TEXT = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


# ── Generation ─────────────────────────────────────────────────────────────

def generate(timestamp_ms: int | None = None) -> bytes:
    """
    Generate a UUID v7 as 16 big-endian bytes.

    *timestamp_ms* overrides the clock; it must fit in 48 bits.
    """
    ts = clock.timestamp_ms() if timestamp_ms is None else timestamp_ms
    if not 0 <= ts <= MAX_TIMESTAMP_MS:
        raise ValueError(f"timestamp_ms out of range for UUID v7: {ts}")

    value = bytearray(ts.to_bytes(6, "big") + os.urandom(10))
    value[6] = (value[6] & 0x0F) | 0x70  # version 7
    value[8] = (value[8] & 0x3F) | 0x80  # variant 10
    return bytes(value)


def timestamp_of(value: bytes) -> int:
    """Return the unix millisecond timestamp in the first 48 bits."""
    return int.from_bytes(value[:6], "big")


# ── Text form ─────────────────────────────────────────────────────────────

def to_text(value: bytes) -> str:
    """Canonical lowercase hyphenated hex, e.g. '01890be5-d3c7-7c8e-b261-3bdd8e4a64d3'."""
    return str(uuid.UUID(bytes=value))


def from_text(text: str) -> Result[bytes]:
    """
    Parse hyphenated hex into 16 bytes.

    Accepts any 128-bit value; version and variant bits are not checked.
    """
    if not isinstance(text, str) or len(text) != TEXT_LENGTH or not _UUID_TEXT.fullmatch(text):
        return err(TypeIDParseError(text, f"invalid UUID string: {text!r}"))
    return ok(bytes.fromhex(text.replace("-", "")))


def from_text_or_raise(text: str) -> bytes:
    """Like from_text() but raises TypeIDParseError."""
    return from_text(text).unwrap()


__all__ = [
    "MAX_TIMESTAMP_MS",
    "generate",
    "timestamp_of",
    "to_text",
    "from_text",
    "from_text_or_raise",
]
