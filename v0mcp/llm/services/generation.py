"""Uniform buffered/streamed access to the text-generation provider."""

from __future__ import annotations

import asyncio
from typing import Any, AsyncIterator, Awaitable, Callable, Protocol

from pydantic import ValidationError

from ...core.exceptions import ProviderError, ToolValidationError
from ...core.logging_config import get_logger
from ...core.types import Completion, GenerationResult
from ..schemas.generation import DEFAULT_TEMPERATURE, GenerationRequest

logger = get_logger(__name__)

DEFAULT_CHECKPOINT_INTERVAL = 100

Checkpoint = Callable[[], Awaitable[None]]


class TextStream(Protocol):
    """Finite, single-use sequence of text fragments plus deferred usage."""

    def __aiter__(self) -> AsyncIterator[str]: ...

    async def usage(self) -> dict[str, Any]: ...


class TextProvider(Protocol):
    async def complete(self, request: GenerationRequest) -> Completion: ...

    async def stream(self, request: GenerationRequest) -> TextStream: ...


async def yield_to_loop() -> None:
    """Let the event loop service other ready tasks before resuming."""

    await asyncio.sleep(0)


def build_request(
    prompt_text: str,
    max_output_tokens: int,
    use_streaming: bool,
    temperature: float = DEFAULT_TEMPERATURE,
) -> GenerationRequest:
    """Validate generation parameters, raising ToolValidationError on failure."""

    try:
        return GenerationRequest(
            prompt_text=prompt_text,
            max_output_tokens=max_output_tokens,
            temperature=temperature,
            use_streaming=use_streaming,
        )
    except ValidationError as exc:
        fields = [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise ToolValidationError(f"Invalid generation request: {details}", fields=fields) from exc


class GenerationBridge:
    """Wraps the provider and always returns a :class:`GenerationResult`."""

    def __init__(
        self,
        provider: TextProvider | None = None,
        *,
        checkpoint_interval: int = DEFAULT_CHECKPOINT_INTERVAL,
        checkpoint: Checkpoint | None = None,
    ) -> None:
        if checkpoint_interval <= 0:
            raise ValueError("checkpoint_interval must be positive")
        self._provider = provider
        self._checkpoint_interval = checkpoint_interval
        self._checkpoint = checkpoint or yield_to_loop

    @property
    def provider(self) -> TextProvider:
        if self._provider is None:
            from .v0_client import get_v0_client

            self._provider = get_v0_client()
        return self._provider

    async def generate(
        self,
        prompt_text: str,
        max_output_tokens: int = 4000,
        use_streaming: bool = True,
        *,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> GenerationResult:
        request = build_request(prompt_text, max_output_tokens, use_streaming, temperature)
        return await self.run(request)

    async def run(self, request: GenerationRequest) -> GenerationResult:
        if request.use_streaming:
            return await self._run_streaming(request)
        return await self._run_buffered(request)

    async def _run_buffered(self, request: GenerationRequest) -> GenerationResult:
        completion = await self.provider.complete(request)
        if not completion.text:
            raise ProviderError("v0 returned an empty completion")
        logger.info(
            "generation_buffered_completed",
            text_chars=len(completion.text),
        )
        return GenerationResult(
            text=completion.text,
            usage=dict(completion.usage),
            streamed=False,
            fragment_count=0,
        )

    async def _run_streaming(self, request: GenerationRequest) -> GenerationResult:
        stream = await self.provider.stream(request)
        text, fragment_count = await self.aggregate(stream)
        if fragment_count == 0:
            raise ProviderError("v0 returned an empty stream")
        usage = await stream.usage()
        logger.info(
            "generation_stream_completed",
            fragments=fragment_count,
            text_chars=len(text),
        )
        return GenerationResult(
            text=text,
            usage=dict(usage or {}),
            streamed=True,
            fragment_count=fragment_count,
        )

    async def aggregate(self, fragments: AsyncIterator[str] | TextStream) -> tuple[str, int]:
        """Concatenate fragments in arrival order, yielding periodically.

        Returns the assembled text and the number of fragments consumed.
        """

        parts: list[str] = []
        count = 0
        async for fragment in fragments:
            parts.append(fragment)
            count += 1
            if count % self._checkpoint_interval == 0:
                await self._checkpoint()
        return "".join(parts), count
