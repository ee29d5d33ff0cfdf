"""Shared type definitions."""

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(slots=True, frozen=True)
class Completion:
    """Buffered provider response."""

    text: str
    usage: Mapping[str, Any] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class GenerationResult:
    """Outcome of one generation call, buffered or streamed."""

    text: str
    usage: Mapping[str, Any]
    streamed: bool
    fragment_count: int = 0

    def __post_init__(self) -> None:
        if self.fragment_count < 0:
            raise ValueError("fragment_count cannot be negative")
        if self.streamed and self.fragment_count == 0:
            raise ValueError("a streamed result must contain at least one fragment")
        if not self.streamed and self.fragment_count:
            raise ValueError("a buffered result cannot report fragments")
