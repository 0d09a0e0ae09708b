"""Health Checks — process liveness and database readiness for orchestrators.

Invariants:
    - GET /health/ answers 200 whenever the app can serve a request
    - GET /health/ready answers 503 until app.state holds a manager whose
      SELECT 1 succeeds
    - Neither endpoint uses the {data}/{errors} envelope; they are not part of the user resource
"""

import logging
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness(request: Request):
    """Report the service name and app version."""
    return {
        "status": "healthy",
        "service": "user-crud-api",
        "version": request.app.version,
    }


@router.get("/ready")
async def readiness(request: Request):
    db_manager = getattr(request.app.state, "db_manager", None)
    if db_manager is None or not await db_manager.health_check():
        logger.warning("Readiness check failed: database unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
