"""
typeid_sdk.mcp_server
─────────────────────────
Exposes TypeID operations as MCP (Model Context Protocol) tools so agents
can generate and inspect identifiers without importing Python.

Start the server::

    python -m typeid_sdk.mcp_server
    # or, after install
    typeid-mcp

Configure in an MCP client::

    {
      "mcpServers": {
        "typeid": {
          "command": "python",
          "args": ["-m", "typeid_sdk.mcp_server"]
        }
      }
    }

Tools are collected from the module registry (see ``_registry.py``):
  - typeid_new        — generate TypeIDs for a prefix
  - typeid_parse      — split a TypeID into prefix, suffix, UUID, timestamp
  - typeid_from_uuid  — wrap a UUID string under a prefix
  - typeid_validate   — check a string against the TypeID format
"""
from __future__ import annotations

import asyncio
import json
from typing import Any

from typeid_sdk._registry import collect_mcp_tools
from typeid_sdk.tier0_core.config import get_config
from typeid_sdk.tier0_core.logging import get_logger

logger = get_logger(__name__)


def _build_server() -> Any:
    """Build and return the MCP server instance."""
    try:
        from mcp.server import Server  # type: ignore[import]
        from mcp.server.stdio import stdio_server  # type: ignore[import]
        from mcp.types import TextContent, Tool  # type: ignore[import]
    except ImportError as exc:
        raise ImportError(
            "Install the MCP package to run the MCP server: pip install 'typeid-sdk[mcp]'"
        ) from exc

    server = Server(get_config().mcp_server_name)
    tools = collect_mcp_tools()
    handlers = {spec["name"]: handler for spec, handler in tools}

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return [
            Tool(name=spec["name"], description=spec["description"], inputSchema=spec["schema"])
            for spec, _ in tools
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        try:
            result = await _dispatch_tool(handlers, name, arguments)
            return [TextContent(type="text", text=json.dumps(result, default=str))]
        except Exception as exc:
            logger.warning("typeid.mcp.tool_failed", tool=name, error=str(exc))
            return [TextContent(type="text", text=json.dumps({"error": str(exc)}))]

    return server, stdio_server


async def _dispatch_tool(handlers: dict[str, Any], name: str, args: dict[str, Any]) -> Any:
    """Route a tool call to its registered handler."""
    handler = handlers.get(name)
    if handler is None:
        raise ValueError(f"Unknown tool: {name!r}")
    logger.debug("typeid.mcp.tool_called", tool=name)
    return await handler(args or {})


async def main() -> None:
    server, stdio_server = _build_server()
    logger.info("typeid.mcp.started", name=get_config().mcp_server_name)
    async with stdio_server() as streams:
        await server.run(streams[0], streams[1], server.create_initialization_options())


def run() -> None:
    """Console-script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
