"""Health & Readiness Probes - liveness and reference-timezone readiness.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 while event times run on the UTC fallback

Design Decisions:
    - UTC fallback surfaces as "degraded" readiness rather than an error:
      clock operations keep working, operators still see the degradation
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from eventclock.clock import TimeNormalizer, default_normalizer
from eventclock.config import get_settings
from eventclock.schemas.clock import TimezoneInfo

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

VERSION = "1.0.0"


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": get_settings().service_name,
        "version": VERSION,
    }


@router.get("/ready")
async def readiness_check(normalizer: TimeNormalizer = Depends(default_normalizer)):
    """Readiness probe - reports whether the reference timezone resolved."""
    info = TimezoneInfo.from_reference(normalizer.reference_timezone)
    if info.is_fallback:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "degraded",
                "reason": "timezone_fallback",
                "checks": {"timezone": info.model_dump(mode="json")},
            },
        )
    return {"status": "ready", "checks": {"timezone": info.model_dump(mode="json")}}
