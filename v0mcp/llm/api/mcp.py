"""HTTP façade over the MCP tool dispatcher."""

import asyncio
from typing import Any

from fastapi import APIRouter, HTTPException, Request

from ...core.exceptions import UnknownToolError
from ...core.logging_config import get_logger
from ...mcp.server import call_tool, capabilities
from ..schemas.tools import ToolCallRequest, ToolInvocationResult

router = APIRouter(prefix="/mcp", tags=["mcp"])
logger = get_logger(__name__)


@router.get("")
async def describe_server() -> dict[str, Any]:
    return await capabilities()


@router.post("", response_model=ToolInvocationResult)
async def invoke_tool(payload: ToolCallRequest, request: Request) -> ToolInvocationResult:
    logger.info(
        "tool_request_received",
        tool=payload.name,
        session_id=payload.session_id,
    )

    cancel_event = asyncio.Event()
    if await request.is_disconnected():
        cancel_event.set()

    try:
        result = await call_tool(
            payload.name,
            payload.arguments,
            session_id=payload.session_id,
            cancel_event=cancel_event,
        )
    except UnknownToolError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    logger.info(
        "tool_request_completed",
        tool=payload.name,
        is_error=result.is_error,
    )
    return result
