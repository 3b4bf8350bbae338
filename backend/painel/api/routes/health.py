"""Liveness Probes: /api/health and /api/ping.

Invariants:
    - GET always returns 200 {ok: true, uptime} while the process is up
    - Any other method answers 405 with an Allow header
"""

import time

from fastapi import APIRouter

from painel.schemas.status import HealthResponse

router = APIRouter(prefix="/api", tags=["health"])

_STARTED_AT = time.monotonic()


def uptime_seconds() -> float:
    """Seconds since the application module was loaded."""
    return time.monotonic() - _STARTED_AT


@router.get("/health", response_model=HealthResponse)
@router.get("/ping", response_model=HealthResponse)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthResponse(uptime=uptime_seconds())
