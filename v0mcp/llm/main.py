"""FastAPI application entry point for the HTTP façade."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from ..core.config import (
    SERVER_DESCRIPTION,
    SERVER_NAME,
    SERVER_VERSION,
    env_file_candidates,
    get_settings,
    resolved_env_file,
)
from ..core.logging_config import configure_logging, get_logger
from ..mcp.server import list_tool_names, refresh_tools_schema
from .api.health import router as health_router
from .api.mcp import router as mcp_router

configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan handler."""

    settings = get_settings()
    logger.info(
        "http_facade_startup",
        env=settings.app_env,
        log_level=settings.log_level,
        http_host=settings.http_host,
        http_port=settings.http_port,
        v0_base=str(settings.v0_api_base),
        v0_model=settings.v0_model,
    )
    logger.info(
        "environment_loaded",
        log_file=settings.log_file or "stderr-only",
        env_file=resolved_env_file() or "not-found",
        env_candidates=list(env_file_candidates()),
    )
    await refresh_tools_schema()
    logger.info("mcp_tools_schema_ready", tools=list_tool_names())
    yield
    logger.info("http_facade_shutdown")


app = FastAPI(
    title=SERVER_NAME,
    version=SERVER_VERSION,
    description=SERVER_DESCRIPTION,
    lifespan=lifespan,
)


@app.middleware("http")
async def log_incoming_requests(request: Request, call_next):
    logger.info(
        "http_request_received",
        method=request.method,
        path=request.url.path,
        client=str(request.client[0]) if request.client else "unknown",
    )
    response = await call_next(request)
    logger.info(
        "http_request_completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
    )
    return response

app.include_router(health_router)
app.include_router(mcp_router)


@app.get("/")
async def index() -> dict[str, str]:
    return {"service": SERVER_NAME, "status": "ok"}
