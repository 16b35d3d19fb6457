"""
Health check API routes.
"""

from fastapi import APIRouter, Response, status

from notaire.config.settings import get_settings
from notaire.di.container import get_container

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", status_code=status.HTTP_200_OK)
async def liveness() -> dict:
    """Liveness check: the process is serving requests."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness(response: Response) -> dict:
    """
    Readiness check.

    Checks database connectivity and reports whether the burn mint is
    configured. Returns 503 when the database is unreachable.
    """
    settings = get_settings()
    db_healthy = await get_container().database.health_check()

    if not db_healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return {
        "status": "healthy" if db_healthy else "unhealthy",
        "components": {
            "database": "healthy" if db_healthy else "unhealthy",
            "burn_mint": (
                "placeholder" if settings.burn_mint_is_placeholder else "configured"
            ),
        },
    }
