"""Configuration management for the v0 MCP server."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, AnyHttpUrl, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

_REPO_ROOT = Path(__file__).resolve().parents[2]
_PACKAGE_DIR = Path(__file__).resolve().parents[1]
# Repo root .env wins; the package directory and CWD are fallbacks.
_ENV_FILE_CANDIDATES: tuple[str, ...] = (
    str(_REPO_ROOT / ".env"),
    str(_PACKAGE_DIR / ".env"),
    ".env",
)

SERVER_NAME = "v0-mcp"
SERVER_VERSION = "2.0.0"
SERVER_DESCRIPTION = (
    "MCP server with v0.dev AI integration for frontend UI generation, "
    "React component creation and accessibility auditing"
)


class ServerSettings(BaseSettings):
    """Centralised configuration derived from environment variables."""

    app_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: str | None = Field(
        None,
        description="Log file path; None or an empty string disables file output",
    )

    transport: Literal["stdio", "http"] = Field(
        "stdio", description="Transport used by the run_server entry point"
    )
    http_host: str = Field("0.0.0.0", description="HTTP façade bind host")
    http_port: int = Field(
        3000,
        description="HTTP façade bind port",
        validation_alias=AliasChoices("HTTP_PORT", "PORT"),
    )

    v0_api_key: SecretStr = Field(..., description="v0.dev API key")
    v0_api_base: AnyHttpUrl = Field(
        "https://api.v0.dev/v1", description="OpenAI-compatible v0 endpoint"
    )
    v0_model: str = Field("v0-1.5-md", description="v0 model identifier")

    session_max_entries: int = Field(
        1000, gt=0, description="Upper bound on tracked sessions"
    )
    session_max_age_seconds: float = Field(
        3600.0, gt=0, description="Sessions older than this are evicted"
    )
    stream_checkpoint_interval: int = Field(
        100, gt=0, description="Fragments consumed between cooperative yields"
    )

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE_CANDIDATES,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> ServerSettings:
    """Return a cached ServerSettings instance."""

    return ServerSettings()  # type: ignore[call-arg]


def resolved_env_file() -> str | None:
    """Return the first readable .env file from the candidate list."""

    for candidate in _ENV_FILE_CANDIDATES:
        path = Path(candidate).expanduser()
        if path.is_file():
            return str(path)
    return None


def env_file_candidates() -> tuple[str, ...]:
    """Expose configured env file search order for diagnostics."""

    return _ENV_FILE_CANDIDATES
