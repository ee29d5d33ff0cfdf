"""FastMCP server configuration and dispatch helpers."""

from __future__ import annotations

import asyncio
from typing import Any, Mapping

from ..core.config import SERVER_DESCRIPTION, SERVER_NAME, SERVER_VERSION
from ..core.logging_config import get_logger
from ..llm.schemas.tools import ToolInvocationResult
from .contract import ToolRuntime
from .registry import get_contract, iter_contracts, mcp

# Import tool, resource and prompt modules so registrations run at import time.
from . import prompts, resources, tools  # noqa: F401

logger = get_logger(__name__)

_TOOLS_SCHEMA: list[dict[str, Any]] | None = None


def get_tools_schema() -> list[dict[str, Any]]:
    """Expose the cached MCP tool listing."""

    if _TOOLS_SCHEMA is None:
        raise RuntimeError("MCP tools schema has not been initialised")
    return _TOOLS_SCHEMA


async def call_tool(
    name: str,
    arguments: Mapping[str, Any] | None,
    *,
    session_id: str | None = None,
    cancel_event: asyncio.Event | None = None,
    runtime: ToolRuntime | None = None,
) -> ToolInvocationResult:
    """Execute a tool by name; raises UnknownToolError for unregistered names."""

    contract = get_contract(name)
    logger.debug("mcp_tool_call", name=name, argument_keys=sorted((arguments or {}).keys()))
    return await contract.handle(
        arguments,
        runtime=runtime,
        session_id=session_id,
        cancel_event=cancel_event,
    )


async def refresh_tools_schema() -> list[dict[str, Any]]:
    """Regenerate and cache the tool listing from the FastMCP registry."""

    global _TOOLS_SCHEMA
    tools = await mcp.get_tools()
    schema: list[dict[str, Any]] = []

    for tool in tools.values():
        if not tool.enabled:
            continue

        mcp_tool = tool.to_mcp_tool()
        schema.append(
            {
                "name": mcp_tool.name,
                "description": mcp_tool.description or "",
                "inputSchema": mcp_tool.inputSchema or {"type": "object", "properties": {}},
            }
        )

    _TOOLS_SCHEMA = sorted(schema, key=lambda entry: entry["name"])
    logger.info("mcp_tools_schema_loaded", count=len(_TOOLS_SCHEMA))
    return _TOOLS_SCHEMA


def list_tool_names() -> list[str]:
    return sorted(contract.name for contract in iter_contracts())


def list_resources() -> list[dict[str, str]]:
    return [
        {"uri": resources.DOCS_URI, "name": "api-docs", "mimeType": "text/markdown"},
        {"uri": resources.PERFORMANCE_URI, "name": "performance-metrics", "mimeType": "application/json"},
    ]


def list_prompts() -> list[dict[str, str]]:
    return [
        {"name": name, "title": title}
        for name, (title, _template) in prompts.PROMPT_TEMPLATES.items()
    ]


async def ensure_tools_schema() -> list[dict[str, Any]]:
    if _TOOLS_SCHEMA is None:
        return await refresh_tools_schema()
    return _TOOLS_SCHEMA


async def capabilities() -> dict[str, Any]:
    """Capability listing served by the HTTP façade."""

    tools = await ensure_tools_schema()
    return {
        "name": SERVER_NAME,
        "version": SERVER_VERSION,
        "description": SERVER_DESCRIPTION,
        "capabilities": {"tools": True, "prompts": True, "resources": True},
        "status": "ready",
        "tools": tools,
        "resources": list_resources(),
        "prompts": list_prompts(),
    }
