"""
Health Check API Routes.
"""

from fastapi import APIRouter

from core import get_settings
from core.database import MongoDB
from core.exceptions import DatabaseConnectionError
from internal.api.schemas import HealthResponse


def create_health_routes(database: MongoDB) -> APIRouter:
    """
    Factory function to create health routes.

    Args:
        database: Connection manager whose connectivity is reported

    Returns:
        APIRouter: Configured router with health endpoints
    """
    router = APIRouter(tags=["Health"])

    @router.get(
        "/health",
        response_model=HealthResponse,
        summary="Health Check",
        description="Check service and MongoDB health",
        operation_id="health_check",
    )
    async def health_check():
        """
        Health check endpoint.

        Connects lazily if no request has done so yet, then pings MongoDB.
        Always answers 200; `status` is `degraded` when MongoDB is unreachable.
        """
        settings = get_settings()

        try:
            await database.get_collections()
            db_healthy = await database.health_check()
        except DatabaseConnectionError:
            db_healthy = False

        return HealthResponse(
            status="healthy" if db_healthy else "degraded",
            service=settings.app_name,
            version=settings.app_version,
            database="connected" if db_healthy else "disconnected",
        )

    return router
