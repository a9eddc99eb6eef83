"""Health check schemas for Todos Server."""

from pydantic import BaseModel, ConfigDict


class HealthResponse(BaseModel):
    """Health check response model."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "version": "0.1.0",
                "environment": "development",
                "storage": "healthy",
                "total_tasks": 3,
            }
        }
    )

    status: str
    version: str
    environment: str
    storage: str
    total_tasks: int
