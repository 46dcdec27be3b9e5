"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /api/health/ always returns 200 if process is up (liveness)
    - GET /api/health/ready returns 503 if the store was never initialized

Design Decisions:
    - Reads the store singleton directly, not via Depends(get_store): a missing
      store must produce the probe's own 503 body, not the error envelope
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import media_api.infrastructure.memory_store as store_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])

SERVICE_NAME = "media-api"
SERVICE_VERSION = "1.0.0"


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe — store must exist."""
    store = store_module.media_store
    if store is None:
        logger.warning("Readiness check failed: store not initialized")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "store_unavailable",
            },
        )
    return {
        "status": "ready",
        "checks": {"store": "healthy", "records": store.count()},
    }
