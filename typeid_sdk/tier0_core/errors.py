"""
typeid_sdk.tier0_core.errors
─────────────────────────────
Structured error taxonomy for TypeID construction and parsing. Every failure
is classified at the point of detection into exactly one ErrorKind and
carries the offending value for programmatic branching.

Errors subclass ValueError so framework validators (pydantic, argparse type
callbacks) treat them as ordinary validation failures.
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Error category, stable and safe to switch on."""

    INVALID_PREFIX = "invalid_prefix"
    INVALID_SUFFIX = "invalid_suffix"
    PREFIX_MISMATCH = "prefix_mismatch"
    PARSE_ERROR = "parse_error"


# ── Base error ────────────────────────────────────────────────────────────────

class TypeIDError(ValueError):
    """
    Base class for all TypeID errors. Every error has:
    - kind: ErrorKind classifying the failure
    - value: the value that caused it
    - message: human-readable description
    - metadata: extra structured context (e.g. the prefix rejection reason)
    """

    kind: ErrorKind = ErrorKind.PARSE_ERROR

    def __init__(self, value: Any = None, message: str | None = None, **metadata: Any) -> None:
        self.value = value
        self.metadata = metadata
        self.message = message or self.default_message()
        super().__init__(self.message)

    def default_message(self) -> str:
        return "TypeID validation error"

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "error": {
                "kind": self.kind.value,
                "message": self.message,
                "value": self.value if not isinstance(self.value, tuple) else list(self.value),
            }
        }
        if self.metadata:
            d["error"]["metadata"] = dict(self.metadata)
        return d


# ── Typed error classes ───────────────────────────────────────────────────────

class InvalidPrefixError(TypeIDError):
    """Prefix has invalid characters, a leading/trailing underscore, or is too long."""
    kind = ErrorKind.INVALID_PREFIX

    def __init__(self, value: Any, reason: str, message: str | None = None) -> None:
        self.reason = reason
        super().__init__(value, message, reason=reason)

    def default_message(self) -> str:
        return f"invalid prefix: {self.value!r}. {self.reason}"


class InvalidSuffixError(TypeIDError):
    """Suffix is not 26 base32 characters or overflows 128 bits."""
    kind = ErrorKind.INVALID_SUFFIX

    def default_message(self) -> str:
        return f"invalid suffix: {self.value!r}"


class PrefixMismatchError(TypeIDError):
    """A valid TypeID was parsed but its prefix is not the one expected."""
    kind = ErrorKind.PREFIX_MISMATCH

    def __init__(self, expected: str, actual: str, message: str | None = None) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__((expected, actual), message)

    def default_message(self) -> str:
        return f"prefix mismatch: expected {self.expected!r}, got {self.actual!r}"


class TypeIDParseError(TypeIDError):
    """Input does not have the shape of a TypeID or of a UUID string."""
    kind = ErrorKind.PARSE_ERROR

    def default_message(self) -> str:
        return f"failed to parse TypeID from {self.value!r}"


__all__ = [
    "ErrorKind",
    "TypeIDError",
    "InvalidPrefixError",
    "InvalidSuffixError",
    "PrefixMismatchError",
    "TypeIDParseError",
]
