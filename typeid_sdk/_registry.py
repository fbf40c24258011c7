"""
typeid_sdk._registry
─────────────────────────
Internal module registry — the single source of truth for which modules
exist and which MCP tools each one exposes.

Adding a new module:
  1. Implement it in the right tier
  2. Add ``__sdk_export__`` to the module
  3. Add one tuple to TIER_MODULES below

After step 3, its tools are automatically served by ``mcp_server.py``.
"""
from __future__ import annotations

import importlib
from typing import Any

# ---------------------------------------------------------------------------
# Ordered list of (tier_path, module_name). Modules whose optional
# dependencies are missing are skipped at collection time.
# ---------------------------------------------------------------------------
TIER_MODULES: list[tuple[str, str]] = [
    # tier0_core — codec, generator, typed identifier
    ("tier0_core", "errors"),
    ("tier0_core", "base32"),
    ("tier0_core", "uuid7"),
    ("tier0_core", "typeid"),
    # tier1_runtime — clock, JSON and pydantic support
    ("tier1_runtime", "clock"),
    ("tier1_runtime", "serialize"),
    ("tier1_runtime", "validate"),
    # tier2_integrations — ORM and agent tools
    ("tier2_integrations", "orm"),
    ("tier2_integrations", "tools"),
]


def collect_mcp_tools() -> list[tuple[dict[str, Any], Any]]:
    """
    Discover all MCP tools registered across tier modules.

    Iterates ``TIER_MODULES``, imports each one, reads its
    ``__sdk_export__["mcp_tools"]`` list, resolves the handler callable,
    and returns a flat list of ``(tool_spec, handler_fn)`` pairs.

    Returns:
        List of ``(spec_dict, async_callable)`` where spec_dict has keys:
        ``name``, ``description``, ``schema``.
    """
    tools: list[tuple[dict[str, Any], Any]] = []

    for tier_path, module_name in TIER_MODULES:
        qualified = f"typeid_sdk.{tier_path}.{module_name}"
        try:
            mod = importlib.import_module(qualified)
        except ImportError:
            # Skip modules whose optional dependencies are not installed.
            continue

        export_meta: dict[str, Any] | None = getattr(mod, "__sdk_export__", None)
        if not export_meta or "mcp_tools" not in export_meta:
            continue

        for tool_spec in export_meta["mcp_tools"]:
            handler_name: str | None = tool_spec.get("handler")
            if not handler_name:
                continue
            handler = getattr(mod, handler_name, None)
            if handler is None:
                continue
            # Strip internal "handler" key — MCP protocol does not need it
            clean_spec = {k: v for k, v in tool_spec.items() if k != "handler"}
            tools.append((clean_spec, handler))

    return tools
