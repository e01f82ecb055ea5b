"""
Health check routes.
Probes for load-balancer liveness and readiness.
"""

from fastapi import APIRouter, Depends, Request
from datetime import datetime, timezone
import time

from wanderlust.db.store import MemoryStore, get_store
from wanderlust.core.rate_limiting import limiter, HEALTH_LIMIT

router = APIRouter(prefix="/health", tags=["health"])

# Track startup time for uptime reporting
_STARTUP_TIME = time.time()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/")
@limiter.limit(HEALTH_LIMIT)
async def health_check(request: Request, store: MemoryStore = Depends(get_store)):
    """Report store state, record counts and uptime."""
    return {
        "status": "healthy" if store.seeded else "starting",
        "store": "seeded" if store.seeded else "empty",
        "records": store.counts(),
        "uptime_seconds": int(time.time() - _STARTUP_TIME),
        "timestamp": _now(),
    }


@router.get("/ready")
@limiter.limit(HEALTH_LIMIT)
async def readiness_check(request: Request, store: MemoryStore = Depends(get_store)):
    """Ready once the seed data has been loaded."""
    return {"ready": store.seeded, "timestamp": _now()}


@router.get("/live")
async def liveness_check():
    """Liveness probe. Returns 200 if service is running."""
    return {"alive": True, "uptime_seconds": int(time.time() - _STARTUP_TIME), "timestamp": _now()}
