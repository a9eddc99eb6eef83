"""Domain types, errors, validation and cancellation for the todos core."""

from .context import Context
from .exceptions import (
    CancelledError,
    ContextError,
    DeadlineExceededError,
    EmptyTitleError,
    InvalidIdentifierError,
    NotFoundError,
    StorageError,
    TodoError,
    ValidationError,
)
from .types import MAX_ID, Task, TaskSchema
from .validation import validate

__all__ = [
    "Context",
    "CancelledError",
    "ContextError",
    "DeadlineExceededError",
    "EmptyTitleError",
    "InvalidIdentifierError",
    "NotFoundError",
    "StorageError",
    "TodoError",
    "ValidationError",
    "MAX_ID",
    "Task",
    "TaskSchema",
    "validate",
]
