"""Todos router for Todos Server."""

from fastapi import APIRouter, Depends, Response, status

from ....core.context import Context
from ...services.task_service import TaskService
from ..dependencies import (
    get_create_request,
    get_request_context,
    get_task_service,
    get_update_request,
    parse_task_id,
)
from ..schemas.common import ErrorResponse
from ..schemas.todos import (
    CreateTaskRequest,
    TaskListResponse,
    TaskResponse,
    UpdateTaskRequest,
)


def create_todos_router() -> APIRouter:
    """Create the task CRUD routes.

    Handlers are plain functions so FastAPI runs them in its worker threadpool.
    Request bodies are decoded as JSON whatever their Content-Type.
    """

    router = APIRouter(
        prefix="/todos",
        tags=["todos"],
        responses={
            400: {"model": ErrorResponse, "description": "Bad request"},
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
    )

    @router.post(
        "",
        response_model=TaskResponse,
        status_code=status.HTTP_201_CREATED,
        summary="Create a task",
    )
    def create_task(
        request: CreateTaskRequest = Depends(get_create_request),
        service: TaskService = Depends(get_task_service),
        ctx: Context = Depends(get_request_context),
    ) -> TaskResponse:
        """Create a new task. New tasks always start as not done."""
        task = service.create(request.title, request.description, ctx=ctx)
        return TaskResponse.from_task(task)

    @router.get(
        "",
        response_model=TaskListResponse,
        summary="List tasks",
    )
    def list_tasks(
        service: TaskService = Depends(get_task_service),
        ctx: Context = Depends(get_request_context),
    ) -> TaskListResponse:
        """List all tasks. Order is not guaranteed."""
        return TaskListResponse.from_tasks(service.get_all(ctx=ctx))

    @router.get(
        "/{task_id}",
        response_model=TaskResponse,
        summary="Get a task",
        responses={404: {"model": ErrorResponse, "description": "Not found"}},
    )
    def get_task(
        task_id: str,
        service: TaskService = Depends(get_task_service),
        ctx: Context = Depends(get_request_context),
    ) -> TaskResponse:
        """Get task by ID."""
        task = service.get_by_id(parse_task_id(task_id), ctx=ctx)
        return TaskResponse.from_task(task)

    @router.put(
        "/{task_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary="Replace a task",
        responses={404: {"model": ErrorResponse, "description": "Not found"}},
    )
    def update_task(
        task_id: str,
        request: UpdateTaskRequest = Depends(get_update_request),
        service: TaskService = Depends(get_task_service),
        ctx: Context = Depends(get_request_context),
    ) -> Response:
        """Overwrite title, description and completion flag of a task."""
        service.update(
            parse_task_id(task_id),
            request.title,
            request.description,
            request.is_done,
            ctx=ctx,
        )
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete(
        "/{task_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary="Delete a task",
        responses={404: {"model": ErrorResponse, "description": "Not found"}},
    )
    def delete_task(
        task_id: str,
        service: TaskService = Depends(get_task_service),
        ctx: Context = Depends(get_request_context),
    ) -> Response:
        """Delete a task."""
        service.delete(parse_task_id(task_id), ctx=ctx)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
