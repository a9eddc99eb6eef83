"""FastAPI application factory for Todos Server."""

import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from loguru import logger

from ...core.types import TaskSchema
from ...storage.base import StorageBackend
from ...storage.memory import InMemoryStorage
from ..config.settings import Settings, get_settings
from ..services.task_service import TaskService
from .errors import register_exception_handlers
from .routers import create_health_router, create_todos_router


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[StorageBackend[TaskSchema]] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    The storage backend lives as long as the application; pass one in to
    share it with a test or to substitute another backend.
    """
    settings = settings or get_settings()
    storage = storage if storage is not None else InMemoryStorage[TaskSchema]()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info(
            "{} starting up on {}:{}",
            settings.APP_NAME,
            settings.API_HOST,
            settings.API_PORT,
        )
        yield
        # Shutdown
        logger.info("{} shutting down...", settings.APP_NAME)

    app = FastAPI(
        title=settings.APP_NAME,
        description="A minimal task-management service backed by in-memory storage",
        version=settings.APP_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if settings.API_DEBUG else None,
        redoc_url="/redoc" if settings.API_DEBUG else None,
    )
    app.state.settings = settings
    app.state.storage = storage
    app.state.task_service = TaskService(storage)

    _add_middleware(app)
    register_exception_handlers(app)
    _add_routes(app)

    return app


def _add_middleware(app: FastAPI) -> None:
    """Add middleware to the application."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.error(
                "{} {} raised after {:.1f}ms",
                request.method,
                request.url.path,
                elapsed_ms,
            )
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "{} {} {} {:.1f}ms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response


def _add_routes(app: FastAPI) -> None:
    """Add routes to the application."""
    app.include_router(create_health_router())
    app.include_router(create_todos_router())
