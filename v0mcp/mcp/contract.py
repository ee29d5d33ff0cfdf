"""Tool contract: validation, prompt rendering and the result envelope."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, ClassVar, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from ..core.config import get_settings
from ..core.exceptions import (
    InternalError,
    ProviderError,
    ToolCancelledError,
    ToolInvocationError,
    ToolValidationError,
)
from ..core.logging_config import get_logger
from ..llm.schemas.tools import ToolInvocationResult
from ..llm.services.generation import GenerationBridge
from ..llm.services.session_metrics import SessionMetricsTracker, new_session_id

logger = get_logger(__name__)


class ToolInput(BaseModel):
    """Base for tool argument models.

    Unknown keys are rejected. Fields are declared in snake_case and also
    accept their camelCase spelling.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        loc_by_alias=False,
    )

    stream: bool = Field(
        True, description="Whether to stream the response for better performance"
    )


@dataclass(slots=True)
class ToolRuntime:
    """Collaborators a tool needs to execute; injectable for tests."""

    bridge: GenerationBridge
    sessions: SessionMetricsTracker


@lru_cache
def default_runtime() -> ToolRuntime:
    settings = get_settings()
    return ToolRuntime(
        bridge=GenerationBridge(checkpoint_interval=settings.stream_checkpoint_interval),
        sessions=SessionMetricsTracker(
            max_sessions=settings.session_max_entries,
            max_age_seconds=settings.session_max_age_seconds,
        ),
    )


def format_validation_error(exc: ValidationError) -> tuple[str, list[str]]:
    fields: list[str] = []
    details: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "arguments"
        fields.append(location)
        details.append(f"{location}: {error['msg']}")
    return "; ".join(details), fields


class ToolContract:
    """A named operation that renders one prompt and forwards it to the model.

    Subclasses declare ``name``, ``description``, ``input_model`` and
    ``max_output_tokens`` and implement :meth:`render`. :meth:`handle` never
    raises for invocation failures; they come back as ``is_error`` envelopes.
    """

    name: ClassVar[str]
    title: ClassVar[str]
    description: ClassVar[str]
    input_model: ClassVar[type[ToolInput]]
    max_output_tokens: ClassVar[int] = 4000
    error_prefix: ClassVar[str] = "Error running tool"
    tags: ClassVar[frozenset[str]] = frozenset()

    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema(by_alias=False)

    def validate(self, arguments: Mapping[str, Any] | None) -> ToolInput:
        try:
            return self.input_model.model_validate(dict(arguments or {}))
        except ValidationError as exc:
            details, fields = format_validation_error(exc)
            raise ToolValidationError(
                f"Invalid arguments for {self.name}: {details}", fields=fields
            ) from exc

    def render(self, params: Any) -> str:
        raise NotImplementedError

    def describe(self, params: Any) -> dict[str, Any]:
        """Tool-specific metadata recorded alongside a successful result."""

        return {}

    async def handle(
        self,
        arguments: Mapping[str, Any] | None,
        *,
        runtime: ToolRuntime | None = None,
        session_id: str | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> ToolInvocationResult:
        runtime = runtime or default_runtime()
        log = logger.bind(tool=self.name)

        try:
            if cancel_event is not None and cancel_event.is_set():
                raise ToolCancelledError("Request was cancelled")

            params = self.validate(arguments)
            session_id = self._open_session(runtime.sessions, session_id)
            runtime.sessions.track_tool(session_id, self.name)
            log.info("tool_invocation_started", session_id=session_id, stream=params.stream)

            prompt = self.render(params)
            result = await runtime.bridge.generate(
                prompt, self.max_output_tokens, params.stream
            )
        except ToolValidationError as exc:
            log.warning("tool_invocation_rejected", fields=exc.fields)
            return self._failure(exc)
        except ToolCancelledError as exc:
            log.info("tool_invocation_cancelled")
            return self._failure(exc)
        except ProviderError as exc:
            log.error("tool_invocation_failed", error_type=type(exc).__name__, message=str(exc))
            return self._failure(exc)
        except Exception as exc:  # noqa: BLE001 - converted into an error envelope
            log.exception("tool_invocation_crashed")
            return self._failure(InternalError(str(exc) or type(exc).__name__))

        metrics = runtime.sessions.get_metrics(session_id)
        metadata: dict[str, Any] = {
            "tool": self.name,
            **self.describe(params),
            "streamed": result.streamed,
            "chunkCount": result.fragment_count,
            "performance_metrics": metrics.to_dict() if metrics else None,
            "usage": dict(result.usage),
            "session_id": session_id,
        }
        log.info(
            "tool_invocation_succeeded",
            session_id=session_id,
            streamed=result.streamed,
            chunks=result.fragment_count,
            text_chars=len(result.text),
        )
        return ToolInvocationResult.success(result.text, metadata)

    def _open_session(self, sessions: SessionMetricsTracker, session_id: str | None) -> str:
        if session_id and sessions.has_session(session_id):
            return session_id
        session_id = session_id or new_session_id()
        sessions.start_session(session_id)
        return session_id

    def _failure(self, exc: ToolInvocationError) -> ToolInvocationResult:
        return ToolInvocationResult.failure(
            f"{self.error_prefix}: {exc}",
            {"tool": self.name, "error_type": type(exc).__name__},
        )
