"""Common schemas for Todos Server."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"error": "task not found"}}
    )

    error: str = Field(..., description="Human readable error message")
