"""Health Routes — liveness and database readiness of the member registry.

Invariants:
    - GET /health/ answers 200 whenever the process is serving requests
    - GET /health/ready answers 503 until init_db has run and the database answers

Design Decisions:
    - db_manager read through the module at call time: it is assigned during lifespan,
      after this module is imported
    - Service name and version come from the FastAPI app, not duplicated here
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from app.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(request: Request):
    return {
        "status": "healthy",
        "service": request.app.title,
        "version": request.app.version,
    }


@router.get("/ready")
async def readiness_check():
    """Ready only when the members database accepts a ping."""
    manager = database.db_manager
    if manager is None:
        return _not_ready("database_not_initialized")
    if not await manager.health_check():
        return _not_ready("database_unavailable")
    return {"status": "ready", "checks": {"database": "healthy"}}


def _not_ready(reason: str) -> JSONResponse:
    logger.warning("Readiness check failed", extra={"error_code": reason.upper()})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )
