"""
typeid_sdk.tier0_core.result
─────────────────────────────
Result envelope returned by every fallible TypeID operation. Callers either
branch on ``result.ok`` or call ``result.unwrap()`` to get fail-fast
behaviour with the same structured error attached.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from typeid_sdk.tier0_core.errors import TypeIDError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or a TypeIDError, never both."""
    value: T | None = None
    error: TypeIDError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the attached error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        return default if self.error is not None else self.value  # type: ignore[return-value]

    def as_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "value": None if self.value is None else str(self.value),
            "error": None if self.error is None else self.error.to_dict()["error"],
        }


def ok(value: T) -> Result[T]:
    """Return a successful Result."""
    return Result(value=value)


def err(error: TypeIDError) -> Result[Any]:
    """Return a failed Result."""
    return Result(error=error)


__all__ = ["Result", "ok", "err"]
