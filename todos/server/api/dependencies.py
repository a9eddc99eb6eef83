"""FastAPI dependencies shared by the routers."""

import re
from typing import Iterator, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ...core.context import Context
from ...core.types import MAX_ID
from ..services.task_service import TaskService
from .errors import BadRequestError
from .schemas.todos import CreateTaskRequest, UpdateTaskRequest

_DIGITS = re.compile(r"[0-9]+")

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_task_service(request: Request) -> TaskService:
    """Return the service instance created by the application factory."""
    return request.app.state.task_service


def get_request_context(request: Request) -> Iterator[Context]:
    """Yield a per-request context that expires after REQUEST_TIMEOUT seconds.

    The context is cancelled once the request has been handled.
    """
    timeout = request.app.state.settings.REQUEST_TIMEOUT
    with Context.with_timeout(timeout) as ctx:
        yield ctx


def parse_task_id(raw: str) -> int:
    """Parse a path segment as an unsigned 64-bit task id."""
    if not raw:
        raise BadRequestError("task id is required")
    if not _DIGITS.fullmatch(raw):
        raise BadRequestError("invalid task id format")
    task_id = int(raw)
    if task_id > MAX_ID:
        raise BadRequestError("invalid task id format")
    return task_id


def _parse_body(model: Type[ModelT], raw: bytes) -> ModelT:
    # The body is decoded as JSON whatever Content-Type the client sent
    try:
        return model.model_validate_json(raw)
    except PydanticValidationError:
        raise BadRequestError("invalid request body") from None


async def get_create_request(request: Request) -> CreateTaskRequest:
    """Decode the body of ``POST /todos``."""
    return _parse_body(CreateTaskRequest, await request.body())


async def get_update_request(request: Request) -> UpdateTaskRequest:
    """Decode the body of ``PUT /todos/{id}``."""
    return _parse_body(UpdateTaskRequest, await request.body())
