"""Pydantic schemas for the tool invocation envelope."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolInvocationResult(BaseModel):
    """Envelope returned by every tool, successful or not."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[TextContent] = Field(..., min_length=1)
    metadata: dict[str, Any] = Field(default_factory=dict)
    is_error: bool = Field(False, alias="isError")

    @property
    def text(self) -> str:
        return "".join(block.text for block in self.content)

    @classmethod
    def success(cls, text: str, metadata: dict[str, Any]) -> "ToolInvocationResult":
        return cls(content=[TextContent(text=text)], metadata=metadata, is_error=False)

    @classmethod
    def failure(cls, message: str, metadata: dict[str, Any] | None = None) -> "ToolInvocationResult":
        return cls(content=[TextContent(text=message)], metadata=metadata or {}, is_error=True)


class ToolCallRequest(BaseModel):
    """Body accepted by the HTTP façade's invocation endpoint."""

    name: str = Field(..., min_length=1, description="Registered tool name")
    arguments: dict[str, Any] = Field(default_factory=dict)
    session_id: str | None = Field(
        None, description="Existing session to attribute the call to"
    )
