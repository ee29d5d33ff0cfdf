"""Shared helpers for rendering tool prompts."""

from __future__ import annotations

from typing import Iterable

HEX_COLOR_PATTERN = r"^#?([0-9a-fA-F]{3,8})$"


def join_or(items: Iterable[str], fallback: str) -> str:
    """Comma-join items, or return ``fallback`` when there are none."""

    values = [item for item in items if item]
    return ", ".join(values) if values else fallback


def numbered(items: Iterable[str | None]) -> str:
    """Number the non-empty deliverables, skipping disabled ones."""

    lines = [item for item in items if item]
    return "\n".join(f"{index}. {line}" for index, line in enumerate(lines, start=1))


def fenced(code: str, language: str = "") -> str:
    return f"```{language}\n{code}\n```"


def section(title: str, body: str) -> str:
    return f"## {title}\n{body.strip()}\n"


def compose(*parts: str) -> str:
    return "\n".join(part for part in parts if part).strip() + "\n"
