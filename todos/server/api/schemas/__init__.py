"""API schemas for Todos Server."""

from .common import ErrorResponse
from .health import HealthResponse
from .todos import (
    CreateTaskRequest,
    TaskListResponse,
    TaskResponse,
    UpdateTaskRequest,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "CreateTaskRequest",
    "TaskListResponse",
    "TaskResponse",
    "UpdateTaskRequest",
]
