"""System router for non-versioned application endpoints.

Provides root and health endpoints that are not part of the versioned API
contract. Both are public and side-effect free so load balancers can poll
them.
"""

from fastapi import APIRouter, Depends

from src.core.config import settings
from src.core.container import get_database
from src.infrastructure.persistence.database import Database
from src.schemas.common import HealthResponse


system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Service name, status and version.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health", response_model=HealthResponse)
async def health(database: Database = Depends(get_database)) -> HealthResponse:
    """Health check endpoint for monitoring and load balancers.

    Reports "degraded" rather than failing when the database is unreachable.
    """
    database_ok = await database.check_connection()
    return HealthResponse(
        status="healthy" if database_ok else "degraded",
        version=settings.app_version,
        database="ok" if database_ok else "unavailable",
    )
