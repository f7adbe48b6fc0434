import time
from datetime import datetime, timezone

from fastapi import APIRouter

health_router = APIRouter(tags=["health"])

_started = time.monotonic()


@health_router.get("/health", summary="Liveness check")
async def health():
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": time.monotonic() - _started,
    }
