"""API routers for Todos Server."""

from .health import create_health_router
from .todos import create_todos_router

__all__ = ["create_health_router", "create_todos_router"]
