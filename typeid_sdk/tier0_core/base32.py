"""
typeid_sdk.tier0_core.base32
─────────────────────────────
Base32 codec for TypeID suffixes. Maps a 16-byte (128-bit) value to a
26-character string and back, most significant bits first.

26 symbols * 5 bits = 130 bits, so the first symbol only carries 3 bits of
payload (0-7). The alphabet is Crockford's, lowercase, and ascending symbol
order equals ascending numeric value, so comparing two suffixes as strings
gives the same answer as comparing the 128-bit values.
"""
from __future__ import annotations

from typeid_sdk.tier0_core.errors import InvalidSuffixError
from typeid_sdk.tier0_core.result import Result, err, ok

ALPHABET = "0123456789abcdefghjkmnpqrstvwxyz"
ENCODED_LENGTH = 26
DECODED_LENGTH = 16

_DECODE_MAP: dict[str, int] = {ch: i for i, ch in enumerate(ALPHABET)}
_MAX_FIRST = 0b111


def encode(data: bytes) -> str:
    """Encode exactly 16 bytes into a 26-character suffix."""
    if len(data) != DECODED_LENGTH:
        raise ValueError(f"expected {DECODED_LENGTH} bytes, got {len(data)}")
    value = int.from_bytes(data, "big")
    return "".join(
        ALPHABET[(value >> ((ENCODED_LENGTH - 1 - i) * 5)) & 0x1F]
        for i in range(ENCODED_LENGTH)
    )


def decode(text: str) -> Result[bytes]:
    """
    Decode a 26-character suffix into 16 bytes.

    Fails with InvalidSuffixError on wrong length, characters outside the
    alphabet (including uppercase), or a first symbol above 7, which would
    need more than 128 bits.
    """
    if not isinstance(text, str) or len(text) != ENCODED_LENGTH:
        return err(InvalidSuffixError(text))

    value = 0
    for ch in text:
        digit = _DECODE_MAP.get(ch)
        if digit is None:
            return err(InvalidSuffixError(text))
        value = (value << 5) | digit

    if _DECODE_MAP[text[0]] > _MAX_FIRST:
        return err(InvalidSuffixError(text))

    return ok(value.to_bytes(DECODED_LENGTH, "big"))


def decode_or_raise(text: str) -> bytes:
    """Like decode() but raises InvalidSuffixError."""
    return decode(text).unwrap()


__all__ = ["ALPHABET", "ENCODED_LENGTH", "DECODED_LENGTH", "encode", "decode", "decode_or_raise"]
