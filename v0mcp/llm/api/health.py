"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter

from ...core.config import SERVER_VERSION

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", include_in_schema=False)
@router.get("/")
async def health_check() -> dict[str, str]:
    return {
        "status": "healthy",
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
        "version": SERVER_VERSION,
    }
