"""Pydantic schema for a single generation request."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_OUTPUT_TOKENS = 4000


class GenerationRequest(BaseModel):
    """Immutable description of one call to the text-generation provider."""

    model_config = ConfigDict(frozen=True)

    prompt_text: str = Field(..., min_length=1)
    max_output_tokens: int = Field(DEFAULT_MAX_OUTPUT_TOKENS, gt=0)
    temperature: float = Field(DEFAULT_TEMPERATURE, ge=0.0, le=2.0)
    use_streaming: bool = True

    def as_messages(self) -> list[dict[str, str]]:
        return [{"role": "user", "content": self.prompt_text}]
