"""Read-only MCP resources."""

from __future__ import annotations

import json
import platform
import time
from typing import Any

import psutil

from ..core.config import SERVER_DESCRIPTION, SERVER_NAME, SERVER_VERSION
from .contract import default_runtime
from .prompts import PROMPT_TEMPLATES
from .registry import iter_contracts, mcp

DOCS_URI = "v0://docs"
PERFORMANCE_URI = "v0://performance"

_PROCESS_STARTED = time.monotonic()

FEATURE_FLAGS: dict[str, bool] = {
    "streaming_enabled": True,
    "performance_tracking": True,
    "accessibility_auditing": True,
    "prompt_templates": True,
    "http_facade": True,
}


def uptime_seconds() -> float:
    return round(time.monotonic() - _PROCESS_STARTED, 3)


def performance_snapshot() -> dict[str, Any]:
    """Compute the performance resource payload on read."""

    memory = psutil.Process().memory_info()
    return {
        "server_info": {
            "name": SERVER_NAME,
            "version": SERVER_VERSION,
            "uptime_seconds": uptime_seconds(),
            "memory_usage": {"rss": memory.rss, "vms": memory.vms},
            "python_version": platform.python_version(),
            "platform": platform.platform(),
        },
        "active_sessions": len(default_runtime().sessions),
        "available_tools": sorted(contract.name for contract in iter_contracts()),
        "features": FEATURE_FLAGS,
    }


def render_docs() -> str:
    lines = [
        f"# {SERVER_NAME} v{SERVER_VERSION}",
        "",
        SERVER_DESCRIPTION + ".",
        "",
        "Every tool returns `{content: [{type: text, text}], metadata, isError}`. "
        "Failures set `isError` and carry the message as the only content entry.",
        "",
        "## Tools",
        "",
    ]
    for contract in sorted(iter_contracts(), key=lambda item: item.name):
        schema = contract.input_schema()
        fields = contract.input_model.model_fields
        lines.append(f"### `{contract.name}`")
        lines.append("")
        lines.append(contract.description)
        lines.append("")
        for field_name, spec in schema.get("properties", {}).items():
            field = fields[field_name]
            if field.is_required():
                marker = "required"
            else:
                default = field.get_default(call_default_factory=True)
                marker = f"default `{json.dumps(default)}`"
            lines.append(f"- `{field_name}` ({marker}): {spec.get('description', '')}")
        lines.append("")
    lines += [
        "## Resources",
        "",
        f"- `{DOCS_URI}`: this document",
        f"- `{PERFORMANCE_URI}`: uptime, memory, sessions and registered tools as JSON",
        "",
    ]
    lines += ["## Prompts", ""]
    lines += [f"- `{name}`: {title}" for name, (title, _template) in PROMPT_TEMPLATES.items()]
    lines += [
        "",
        "## Environment",
        "",
        "- `V0_API_KEY` (required): v0.dev API key",
        "- `TRANSPORT`: `stdio` (default) or `http`",
        "- `LOG_LEVEL`: DEBUG, INFO, WARNING or ERROR",
    ]
    return "\n".join(lines) + "\n"


@mcp.resource(
    DOCS_URI,
    name="api-docs",
    description="API documentation and examples",
    mime_type="text/markdown",
)
def api_docs() -> str:
    return render_docs()


@mcp.resource(
    PERFORMANCE_URI,
    name="performance-metrics",
    description="Process uptime, memory usage and registered tools",
    mime_type="application/json",
)
def performance_metrics() -> str:
    return json.dumps(performance_snapshot(), ensure_ascii=False, indent=2)
