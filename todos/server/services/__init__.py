"""Services for Todos Server."""

from .task_service import TaskService

__all__ = [
    "TaskService",
]
