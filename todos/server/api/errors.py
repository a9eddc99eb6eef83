"""Mapping from core errors to HTTP responses.

The core raises ``TodoError`` subclasses and knows nothing about HTTP; this
module is the only place that turns them into status codes.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from ...core.exceptions import NotFoundError, TodoError, ValidationError

INTERNAL_ERROR_MESSAGE = "internal server error"


class BadRequestError(Exception):
    """Raised by the transport layer for requests it cannot parse."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"error": message}, headers=headers
    )


def status_for(exc: TodoError) -> int:
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def message_for(exc: TodoError) -> str:
    if isinstance(exc, NotFoundError):
        return "task not found"
    if isinstance(exc, ValidationError):
        return str(exc)
    return INTERNAL_ERROR_MESSAGE


async def todo_error_handler(request: Request, exc: TodoError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        notes = "; ".join(getattr(exc, "__notes__", []))
        logger.error(
            "{} {} failed: {}: {} ({})",
            request.method,
            request.url.path,
            type(exc).__name__,
            exc,
            notes,
        )
    return error_response(status_code, message_for(exc))


async def bad_request_handler(request: Request, exc: BadRequestError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.debug("Rejected body for {} {}: {}", request.method, request.url.path, exc)
    return error_response(status.HTTP_400_BAD_REQUEST, "invalid request body")


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return error_response(
        exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None)
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error(
        "Unhandled error on {} {}", request.method, request.url.path
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error-to-response mapping on ``app``."""
    app.add_exception_handler(TodoError, todo_error_handler)
    app.add_exception_handler(BadRequestError, bad_request_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
