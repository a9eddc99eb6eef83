"""Health check router for Todos Server."""

from fastapi import APIRouter, Depends, Request

from ...services.task_service import TaskService
from ..dependencies import get_task_service
from ..schemas.health import HealthResponse


def create_health_router() -> APIRouter:
    """Create health check routes."""
    router = APIRouter(prefix="/health", tags=["health"])

    @router.get("", response_model=HealthResponse)
    def health_check(
        request: Request, service: TaskService = Depends(get_task_service)
    ) -> HealthResponse:
        """Health check endpoint."""
        settings = request.app.state.settings

        # Exercise the storage read path
        try:
            total = len(service.get_all())
            storage_status = "healthy"
        except Exception as e:
            total = 0
            storage_status = f"unhealthy: {str(e)}"

        return HealthResponse(
            status="healthy",
            version=settings.APP_VERSION,
            environment=settings.APP_ENVIRONMENT,
            storage=storage_status,
            total_tasks=total,
        )

    @router.get("/ready")
    async def readiness_check():
        """Readiness check endpoint."""
        return {"status": "ready"}

    @router.get("/live")
    async def liveness_check():
        """Liveness check endpoint."""
        return {"status": "alive"}

    return router
