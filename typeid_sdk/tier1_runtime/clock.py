"""
typeid_sdk.tier1_runtime.clock
──────────────────────────────────
Mockable time source for UUIDv7 generation. The generator reads the current
millisecond timestamp through here instead of calling time.time() directly,
so tests can freeze or advance time without patching the stdlib.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable


# ── Clock implementation ───────────────────────────────────────────────────

class Clock:
    """Mockable clock. Override _now_fn to control time in tests."""

    def __init__(self, now_fn: Callable[[], datetime] | None = None) -> None:
        self._now_fn = now_fn or (lambda: datetime.now(tz=timezone.utc))

    def now(self) -> datetime:
        """Return the current UTC datetime."""
        return self._now_fn()

    def timestamp_ms(self) -> int:
        """Return the current Unix timestamp in milliseconds."""
        dt = self.now()
        # exact integer ms, no float rounding
        delta = dt - datetime(1970, 1, 1, tzinfo=timezone.utc)
        return delta.days * 86_400_000 + delta.seconds * 1000 + delta.microseconds // 1000

    def freeze(self, dt: datetime) -> "Clock":
        """Return a new Clock frozen at the given datetime."""
        return Clock(now_fn=lambda: dt)

    @classmethod
    def frozen_ms(cls, ms: int) -> "Clock":
        """Return a Clock frozen at a Unix millisecond timestamp."""
        return cls().freeze(from_ms(ms))


def from_ms(ms: int) -> datetime:
    """Convert Unix milliseconds to an aware UTC datetime, exactly."""
    seconds, millis = divmod(ms, 1000)
    return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=millis * 1000)


# ── Module-level singleton ─────────────────────────────────────────────────

_clock = Clock()


def get_clock() -> Clock:
    """Return the global clock instance."""
    return _clock


def set_clock(clock: Clock) -> None:
    """Replace the global clock (use in tests)."""
    global _clock
    _clock = clock


def now() -> datetime:
    """Return the current UTC datetime."""
    return _clock.now()


def timestamp_ms() -> int:
    """Return the current Unix timestamp in milliseconds."""
    return _clock.timestamp_ms()


__all__ = ["Clock", "from_ms", "get_clock", "set_clock", "now", "timestamp_ms"]
