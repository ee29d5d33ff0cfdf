"""v0 API client abstraction backed by the OpenAI SDK."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, AsyncIterator

from openai import APIError as OpenAIError
from openai import AsyncOpenAI, RateLimitError

from ...core.config import get_settings
from ...core.exceptions import ProviderError, RateLimitExceeded
from ...core.logging_config import get_logger
from ...core.types import Completion
from ..schemas.generation import GenerationRequest

logger = get_logger(__name__)


def _translate_sdk_error(exc: OpenAIError) -> ProviderError:
    logger.error(
        "v0_sdk_error",
        error_type=type(exc).__name__,
        message=str(exc),
    )
    if isinstance(exc, RateLimitError):
        return RateLimitExceeded(f"v0 rate limit exceeded: {exc}")
    return ProviderError(f"v0 SDK error: {exc}")


def _dump_usage(usage: Any) -> dict[str, Any]:
    if usage is None:
        return {}
    if hasattr(usage, "model_dump"):
        return usage.model_dump()
    return dict(usage)


class V0TextStream:
    """Single-use async iterator over the text deltas of a streamed completion.

    The final chunk of an OpenAI-compatible stream carries the usage block
    when ``stream_options.include_usage`` is set; it is captured on the way
    and exposed through :meth:`usage` once the fragments are exhausted.
    """

    def __init__(self, chunks: AsyncIterator[Any]) -> None:
        self._chunks = chunks
        self._usage: dict[str, Any] = {}
        self._consumed = False

    def __aiter__(self) -> AsyncIterator[str]:
        if self._consumed:
            raise RuntimeError("text stream has already been consumed")
        self._consumed = True
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[str]:
        try:
            async for chunk in self._chunks:
                if getattr(chunk, "usage", None) is not None:
                    self._usage = _dump_usage(chunk.usage)
                for choice in chunk.choices or []:
                    delta = getattr(choice.delta, "content", None)
                    if delta:
                        yield delta
        except OpenAIError as exc:
            raise _translate_sdk_error(exc) from exc

    async def usage(self) -> dict[str, Any]:
        return self._usage


class V0Client:
    """Thin wrapper around the OpenAI-compatible v0 chat API."""

    def __init__(self) -> None:
        settings = get_settings()
        secret = settings.v0_api_key.get_secret_value()
        masked_key = f"{secret[:4]}***{secret[-4:]}"
        base_url = str(settings.v0_api_base).rstrip("/")
        if not base_url.endswith("/v1"):
            base_url = f"{base_url}/v1"
        self._model = settings.v0_model
        logger.info(
            "v0_client_init",
            base_url=base_url,
            model=self._model,
            api_key_masked=masked_key,
        )
        self._client = AsyncOpenAI(api_key=secret, base_url=base_url)

    async def complete(self, request: GenerationRequest) -> Completion:
        """Issue one buffered completion request."""

        logger.info(
            "v0_completion_request",
            max_tokens=request.max_output_tokens,
            temperature=request.temperature,
            prompt_chars=len(request.prompt_text),
        )
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=request.as_messages(),
                max_tokens=request.max_output_tokens,
                temperature=request.temperature,
            )
        except OpenAIError as exc:  # pragma: no cover - network path
            raise _translate_sdk_error(exc) from exc

        if not response.choices:
            raise ProviderError("v0 returned a completion without choices")
        text = response.choices[0].message.content or ""
        return Completion(text=text, usage=_dump_usage(response.usage))

    async def stream(self, request: GenerationRequest) -> V0TextStream:
        """Open a streamed completion and return its fragment sequence."""

        logger.info(
            "v0_stream_request",
            max_tokens=request.max_output_tokens,
            temperature=request.temperature,
            prompt_chars=len(request.prompt_text),
        )
        try:
            chunks = await self._client.chat.completions.create(
                model=self._model,
                messages=request.as_messages(),
                max_tokens=request.max_output_tokens,
                temperature=request.temperature,
                stream=True,
                stream_options={"include_usage": True},
            )
        except OpenAIError as exc:  # pragma: no cover - network path
            raise _translate_sdk_error(exc) from exc
        return V0TextStream(chunks)


@lru_cache
def get_v0_client() -> V0Client:
    """Return the process-wide client, created on first use."""

    return V0Client()
