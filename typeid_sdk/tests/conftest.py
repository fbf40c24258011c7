"""
typeid_sdk test configuration.

Tests run against the in-process clock and an in-memory SQLite engine — no
external services required.
"""
from __future__ import annotations

import os

import pytest

# ── Environment ────────────────────────────────────────────────────────────
# These must be set before any typeid_sdk modules read the config.

os.environ.setdefault("TYPEID_ENV", "test")
os.environ.setdefault("TYPEID_LOG_LEVEL", "WARNING")
os.environ.setdefault("TYPEID_LOG_FORMAT", "console")


# ── Fixtures ───────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def restore_clock():
    """Put the global clock back after tests that freeze it."""
    from typeid_sdk.tier1_runtime import clock as _clock

    orig = _clock.get_clock()
    yield
    _clock.set_clock(orig)


@pytest.fixture
def frozen_clock():
    """Freeze the global clock at 2023-06-30T10:42:38.663Z and return it."""
    from typeid_sdk.tier1_runtime.clock import Clock, set_clock

    clock = Clock.frozen_ms(1688121758663)
    set_clock(clock)
    return clock


@pytest.fixture
def user_tid():
    from typeid_sdk.tier0_core.typeid import TypeID
    return TypeID.from_string("user_01h45y0sxkfmntta78gqs1vsw6")


@pytest.fixture
def reset_config():
    """Clear the cached config before and after the test."""
    from typeid_sdk.tier0_core.config import _reset_config

    _reset_config()
    yield
    _reset_config()
