"""Pydantic schemas shared by the services and HTTP layer."""

from .generation import GenerationRequest
from .tools import TextContent, ToolCallRequest, ToolInvocationResult

__all__ = [
    "GenerationRequest",
    "TextContent",
    "ToolCallRequest",
    "ToolInvocationResult",
]
