"""
typeid_sdk.tier2_integrations.tools
────────────────────────────────────
Tool handlers that expose TypeID operations to agents. Each handler takes
the tool's argument dict and returns a JSON-serializable dict; failures come
back as ``{"ok": false, "error": {...}}`` rather than raising, so the caller
can branch on the error kind.

Registered through ``__sdk_export__["mcp_tools"]`` and collected by
``typeid_sdk._registry.collect_mcp_tools()``.
"""
from __future__ import annotations

from typing import Any

from typeid_sdk.tier0_core.logging import get_logger
from typeid_sdk.tier0_core.result import Result
from typeid_sdk.tier0_core.typeid import TypeID, from_uuid, is_valid, new, parse

logger = get_logger(__name__)

MAX_NEW_COUNT = 1000


def _iso_timestamp(tid: TypeID) -> str | None:
    # wrapped 128-bit values can carry a time past datetime.MAX
    try:
        return tid.timestamp.isoformat()
    except (ValueError, OverflowError, OSError):
        return None


def _describe(result: Result[TypeID]) -> dict[str, Any]:
    if not result.ok:
        return result.as_dict()
    tid: TypeID = result.value  # type: ignore[assignment]
    return {
        "ok": True,
        "typeid": str(tid),
        "prefix": tid.prefix,
        "suffix": tid.suffix,
        "uuid": tid.uuid,
        "timestamp_ms": tid.timestamp_ms,
        "timestamp": _iso_timestamp(tid),
    }


async def typeid_new(args: dict[str, Any]) -> dict[str, Any]:
    prefix = args.get("prefix", "")
    count = args.get("count", 1)
    if isinstance(count, bool) or not isinstance(count, int) or not 1 <= count <= MAX_NEW_COUNT:
        return {
            "ok": False,
            "error": {
                "kind": "invalid_argument",
                "message": f"count must be an integer between 1 and {MAX_NEW_COUNT}",
                "value": count,
            },
        }
    results = [new(prefix, args.get("timestamp_ms")) for _ in range(count)]
    failed = next((r for r in results if not r.ok), None)
    if failed is not None:
        return failed.as_dict()
    logger.info("typeid.tool.new", prefix=prefix, count=len(results))
    return {"ok": True, "typeids": [str(r.value) for r in results]}


async def typeid_parse(args: dict[str, Any]) -> dict[str, Any]:
    return _describe(parse(args["text"], args.get("prefix")))


async def typeid_from_uuid(args: dict[str, Any]) -> dict[str, Any]:
    return _describe(from_uuid(args.get("prefix", ""), args["uuid"]))


async def typeid_validate(args: dict[str, Any]) -> dict[str, Any]:
    return {"valid": is_valid(args["text"], args.get("prefix"))}


__sdk_export__ = {
    "surface": "agent",
    "exports": ["typeid_new", "typeid_parse", "typeid_from_uuid", "typeid_validate"],
    "description": "Generate, parse and validate TypeIDs",
    "tier": "tier2_integrations",
    "module": "tools",
    "mcp_tools": [
        {
            "name": "typeid_new",
            "description": "Generate one or more new TypeIDs with the given prefix.",
            "schema": {
                "type": "object",
                "properties": {
                    "prefix": {"type": "string", "default": ""},
                    "count": {"type": "integer", "default": 1, "minimum": 1, "maximum": MAX_NEW_COUNT},
                    "timestamp_ms": {"type": "integer", "description": "Unix ms to embed"},
                },
            },
            "handler": "typeid_new",
        },
        {
            "name": "typeid_parse",
            "description": "Parse a TypeID string into prefix, suffix, UUID and timestamp.",
            "schema": {
                "type": "object",
                "properties": {
                    "text": {"type": "string"},
                    "prefix": {"type": "string", "description": "Expected prefix"},
                },
                "required": ["text"],
            },
            "handler": "typeid_parse",
        },
        {
            "name": "typeid_from_uuid",
            "description": "Wrap a hyphenated UUID string as a TypeID with the given prefix.",
            "schema": {
                "type": "object",
                "properties": {
                    "prefix": {"type": "string", "default": ""},
                    "uuid": {"type": "string"},
                },
                "required": ["uuid"],
            },
            "handler": "typeid_from_uuid",
        },
        {
            "name": "typeid_validate",
            "description": "Check whether a string is a valid TypeID (optionally with a prefix).",
            "schema": {
                "type": "object",
                "properties": {
                    "text": {"type": "string"},
                    "prefix": {"type": "string"},
                },
                "required": ["text"],
            },
            "handler": "typeid_validate",
        },
    ],
}
