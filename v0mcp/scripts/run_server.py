"""Run the v0 MCP server.

The transport comes from ``TRANSPORT`` (``stdio`` by default, ``http`` for the
FastAPI façade). Configuration problems are logged and turn into exit code 1.
"""

from __future__ import annotations

import os
import platform
import sys

from pydantic import ValidationError


def _load_settings():
    from v0mcp.core.config import get_settings
    from v0mcp.core.exceptions import ConfigurationError

    try:
        return get_settings()
    except ValidationError as exc:
        missing = [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
        raise ConfigurationError(
            f"Invalid server configuration ({', '.join(missing)}); "
            "set V0_API_KEY in the environment or a .env file"
        ) from exc


def main() -> None:
    from v0mcp.core.exceptions import ConfigurationError
    from v0mcp.core.logging_config import configure_logging, get_logger

    configure_logging()
    logger = get_logger("v0mcp.scripts.run_server")

    try:
        settings = _load_settings()
    except ConfigurationError as exc:
        logger.error("server_configuration_error", error=str(exc))
        raise SystemExit(1) from exc

    logger.info(
        "server_starting",
        transport=settings.transport,
        python=platform.python_version(),
        platform=sys.platform,
        pid=os.getpid(),
        model=settings.v0_model,
    )

    from v0mcp.mcp.server import list_tool_names, mcp

    logger.info("tools_registered", tools=list_tool_names())

    if settings.transport == "http":
        import uvicorn

        reload_enabled = settings.app_env == "development"
        uvicorn.run(
            "v0mcp.llm.main:app",
            host=settings.http_host,
            port=settings.http_port,
            reload=reload_enabled,
        )
        return

    mcp.run(transport="stdio", show_banner=False)


if __name__ == "__main__":
    main()
