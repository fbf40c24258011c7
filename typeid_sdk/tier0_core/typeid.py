"""
typeid_sdk.tier0_core.typeid
─────────────────────────────
Typed identifiers: ``<prefix>_<suffix>``, where the prefix names the entity
kind and the suffix is the 26-character base32 encoding of a UUID v7.

Every fallible operation has one canonical module-level form returning a
Result, and a raising wrapper on the TypeID class that unwraps it:

    result = parse("user_01h45y0sxkfmntta78gqs1vsw6")
    if result.ok:
        tid = result.value

    tid = TypeID.from_string("user_01h45y0sxkfmntta78gqs1vsw6", "user")

Same-prefix TypeIDs sort chronologically, because the base32 alphabet keeps
numeric order under string comparison.
"""
from __future__ import annotations

import re
from datetime import datetime
from typing import Any

from typeid_sdk.tier0_core import base32, uuid7
from typeid_sdk.tier0_core.errors import (
    InvalidPrefixError,
    InvalidSuffixError,
    PrefixMismatchError,
    TypeIDError,
    TypeIDParseError,
)
from typeid_sdk.tier0_core.logging import get_logger
from typeid_sdk.tier0_core.result import Result, err, ok
from typeid_sdk.tier1_runtime.clock import from_ms

logger = get_logger(__name__)

SEPARATOR = "_"
MAX_PREFIX_LENGTH = 63
ZERO_SUFFIX = base32.ALPHABET[0] * base32.ENCODED_LENGTH

_PREFIX_CHARS = re.compile(r"[a-z_]*")


# ── Value type ─────────────────────────────────────────────────────────────

class TypeID:
    """
    Immutable typed identifier. Equality and ordering are over
    ``(prefix, suffix)``: prefix first, then suffix.

    Both halves are validated on construction, so every instance decodes.
    new(), zero(), parse() and friends return the failure as a Result
    instead of raising. The fields are public for matching:

        match tid:
            case TypeID(prefix="user"): ...
    """

    __slots__ = ("prefix", "suffix")
    __match_args__ = ("prefix", "suffix")

    prefix: str
    suffix: str

    def __init__(self, prefix: str, suffix: str) -> None:
        for checked in (validate_prefix(prefix), validate_suffix(suffix)):
            if not checked.ok:
                raise checked.error  # type: ignore[misc]
        object.__setattr__(self, "prefix", prefix)
        object.__setattr__(self, "suffix", suffix)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"TypeID is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"TypeID is immutable; cannot delete {name!r}")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.prefix, self.suffix))

    # ── Equality & ordering ─────────────────────────────────────────────────

    def _key(self) -> tuple[str, str]:
        return (self.prefix, self.suffix)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeID):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: TypeID) -> bool:
        if not isinstance(other, TypeID):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: TypeID) -> bool:
        if not isinstance(other, TypeID):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: TypeID) -> bool:
        if not isinstance(other, TypeID):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: TypeID) -> bool:
        if not isinstance(other, TypeID):
            return NotImplemented
        return self._key() >= other._key()

    # ── Raising constructors ────────────────────────────────────────────────

    @classmethod
    def new(cls, prefix: str = "", timestamp_ms: int | None = None) -> TypeID:
        """Generate a new TypeID. Raises InvalidPrefixError or InvalidSuffixError."""
        return new(prefix, timestamp_ms).unwrap()

    @classmethod
    def zero(cls, prefix: str = "") -> TypeID:
        """Sentinel TypeID with an all-zero suffix. Raises InvalidPrefixError."""
        return zero(prefix).unwrap()

    @classmethod
    def from_parts(cls, prefix: str, suffix: str) -> TypeID:
        return from_parts(prefix, suffix).unwrap()

    @classmethod
    def from_string(cls, text: str, expected_prefix: str | None = None) -> TypeID:
        """Parse ``text``, optionally requiring ``expected_prefix``. Raises TypeIDError."""
        return parse(text, expected_prefix).unwrap()

    @classmethod
    def from_uuid(cls, prefix: str, uuid_text: str) -> TypeID:
        return from_uuid(prefix, uuid_text).unwrap()

    @classmethod
    def from_uuid_bytes(cls, prefix: str, data: bytes) -> TypeID:
        return from_uuid_bytes(prefix, data).unwrap()

    # ── Views ───────────────────────────────────────────────────────────────

    def to_text(self) -> str:
        if not self.prefix:
            return self.suffix
        return f"{self.prefix}{SEPARATOR}{self.suffix}"

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"TypeID({self.to_text()!r})"

    @property
    def uuid_bytes(self) -> bytes:
        """The 16 raw big-endian bytes of the suffix."""
        return base32.decode_or_raise(self.suffix)

    @property
    def uuid(self) -> str:
        """The suffix as a hyphenated UUID string."""
        return uuid7.to_text(self.uuid_bytes)

    @property
    def timestamp_ms(self) -> int:
        return uuid7.timestamp_of(self.uuid_bytes)

    @property
    def timestamp(self) -> datetime:
        """UTC time embedded in the UUID v7 suffix."""
        return from_ms(self.timestamp_ms)

    # ── Predicates ──────────────────────────────────────────────────────────

    @property
    def has_suffix(self) -> bool:
        return self.suffix != ZERO_SUFFIX

    @property
    def is_zero(self) -> bool:
        return self.prefix == "" and self.suffix == ZERO_SUFFIX

    def has_prefix(self, expected: str) -> bool:
        return self.prefix == expected


# ── Validation ────────────────────────────────────────────────────────────

def validate_prefix(prefix: str) -> Result[str]:
    """Empty is valid; otherwise lowercase letters and inner underscores, at most 63."""
    if not isinstance(prefix, str):
        return err(InvalidPrefixError(prefix, "must be a string"))
    if prefix.startswith(SEPARATOR):
        return err(InvalidPrefixError(prefix, "cannot start with an underscore"))
    if prefix.endswith(SEPARATOR):
        return err(InvalidPrefixError(prefix, "cannot end with an underscore"))
    if len(prefix) > MAX_PREFIX_LENGTH:
        return err(InvalidPrefixError(prefix, f"cannot be more than {MAX_PREFIX_LENGTH} characters"))
    if not _PREFIX_CHARS.fullmatch(prefix):
        return err(InvalidPrefixError(prefix, "can contain only lowercase letters and underscores"))
    return ok(prefix)


def validate_suffix(suffix: str) -> Result[str]:
    decoded = base32.decode(suffix)
    if not decoded.ok:
        return err(decoded.error)  # type: ignore[arg-type]
    return ok(suffix)


# ── Result-returning constructors ─────────────────────────────────────────

def _build(prefix: str, suffix: str) -> Result[TypeID]:
    try:
        return ok(TypeID(prefix, suffix))
    except TypeIDError as e:
        return err(e)


def _check_timestamp(timestamp_ms: Any) -> Result[int | None]:
    if timestamp_ms is None:
        return ok(None)
    if (
        isinstance(timestamp_ms, bool)
        or not isinstance(timestamp_ms, int)
        or not 0 <= timestamp_ms <= uuid7.MAX_TIMESTAMP_MS
    ):
        return err(InvalidSuffixError(
            timestamp_ms, f"timestamp_ms out of range for UUID v7: {timestamp_ms!r}"
        ))
    return ok(timestamp_ms)


def new(prefix: str = "", timestamp_ms: int | None = None) -> Result[TypeID]:
    """
    Generate a TypeID with a fresh UUID v7 suffix.

    An explicit ``timestamp_ms`` that is not an int in ``[0, 2**48)`` fails
    with InvalidSuffixError, since no suffix can carry it.
    """
    for checked in (validate_prefix(prefix), _check_timestamp(timestamp_ms)):
        if not checked.ok:
            return err(checked.error)  # type: ignore[arg-type]
    return _build(prefix, base32.encode(uuid7.generate(timestamp_ms)))


def zero(prefix: str = "") -> Result[TypeID]:
    return _build(prefix, ZERO_SUFFIX)


def from_parts(prefix: str, suffix: str) -> Result[TypeID]:
    """Combine a prefix and a suffix, validating each independently."""
    return _build(prefix, suffix)


def from_uuid_bytes(prefix: str, data: bytes) -> Result[TypeID]:
    """Wrap 16 raw bytes (any 128-bit value) under ``prefix``."""
    checked = validate_prefix(prefix)
    if not checked.ok:
        return err(checked.error)  # type: ignore[arg-type]
    if not isinstance(data, (bytes, bytearray)) or len(data) != base32.DECODED_LENGTH:
        return err(InvalidSuffixError(data, f"expected {base32.DECODED_LENGTH} bytes, got {data!r}"))
    return _build(prefix, base32.encode(bytes(data)))


def from_uuid(prefix: str, uuid_text: str) -> Result[TypeID]:
    """Wrap a hyphenated UUID string under ``prefix``."""
    checked = validate_prefix(prefix)
    if not checked.ok:
        return err(checked.error)  # type: ignore[arg-type]
    data = uuid7.from_text(uuid_text)
    if not data.ok:
        return err(data.error)  # type: ignore[arg-type]
    return _build(prefix, base32.encode(data.value))  # type: ignore[arg-type]


# ── Parsing ───────────────────────────────────────────────────────────────

def _split(text: Any) -> Result[tuple[str, str]]:
    if not isinstance(text, str):
        return err(TypeIDParseError(text))
    if len(text) <= base32.ENCODED_LENGTH:
        return ok(("", text))

    head, suffix = text[: -base32.ENCODED_LENGTH], text[-base32.ENCODED_LENGTH:]
    if not head.endswith(SEPARATOR):
        return err(TypeIDParseError(text, f"missing separator before suffix in {text!r}"))
    prefix = head[: -len(SEPARATOR)]
    if prefix == "":
        return err(TypeIDParseError(
            text, "a TypeID without a prefix should not have a leading underscore"
        ))
    return ok((prefix, suffix))


def parse(text: str, expected_prefix: str | None = None) -> Result[TypeID]:
    """
    Parse ``[<prefix>_]<suffix>``.

    Structural problems fail with TypeIDParseError; a bad prefix or suffix
    half fails with InvalidPrefixError or InvalidSuffixError. When
    ``expected_prefix`` is given, a different prefix fails with
    PrefixMismatchError.
    """
    result = _parse(text, expected_prefix)
    if not result.ok:
        error: TypeIDError = result.error  # type: ignore[assignment]
        logger.debug("typeid.parse_failed", kind=error.kind.value, value=repr(text))
    return result


def _parse(text: str, expected_prefix: str | None) -> Result[TypeID]:
    parts = _split(text)
    if not parts.ok:
        return err(parts.error)  # type: ignore[arg-type]
    prefix, suffix = parts.value  # type: ignore[misc]

    result = from_parts(prefix, suffix)
    if result.ok and expected_prefix is not None and prefix != expected_prefix:
        return err(PrefixMismatchError(expected_prefix, prefix))
    return result


# ── Predicates & comparison ───────────────────────────────────────────────

def is_typeid(term: Any) -> bool:
    return isinstance(term, TypeID)


def is_valid(value: Any, expected_prefix: str | None = None) -> bool:
    """
    True for TypeID instances (valid by construction) and for strings that
    parse, with the expected prefix when one is given.
    """
    if isinstance(value, TypeID):
        return expected_prefix is None or value.prefix == expected_prefix
    if not isinstance(value, str):
        return False
    return parse(value, expected_prefix).ok


def compare(a: TypeID, b: TypeID) -> int:
    """Return -1, 0 or 1. Prefix first, then suffix."""
    ka, kb = (a.prefix, a.suffix), (b.prefix, b.suffix)
    return (ka > kb) - (ka < kb)


__all__ = [
    "TypeID",
    "SEPARATOR",
    "MAX_PREFIX_LENGTH",
    "ZERO_SUFFIX",
    "validate_prefix",
    "validate_suffix",
    "new",
    "zero",
    "from_parts",
    "from_uuid_bytes",
    "from_uuid",
    "parse",
    "is_typeid",
    "is_valid",
    "compare",
]
