"""Error taxonomy shared by the storage engine and the task service.

The core never knows about HTTP; the API layer maps these types to status
codes in ``todos.server.api.errors``.
"""


class TodoError(Exception):
    """Base class for every error raised by the todos core."""


class NotFoundError(TodoError):
    """Raised when an identifier is absent on read, update or delete."""

    def __init__(self, message: str = "resource not found in storage"):
        super().__init__(message)


class ValidationError(TodoError):
    """Raised when a domain invariant is violated before persistence."""


class EmptyTitleError(ValidationError):
    """Raised when a task title has no non-whitespace character."""

    def __init__(self, message: str = "task must have non empty title"):
        super().__init__(message)


class InvalidIdentifierError(ValidationError):
    """Raised when an identifier does not fit an unsigned 64-bit integer."""


class ContextError(TodoError):
    """Raised when the caller's cancellation or deadline signal has fired."""


class CancelledError(ContextError):
    """The caller cancelled the operation."""

    def __init__(self, message: str = "context canceled"):
        super().__init__(message)


class DeadlineExceededError(ContextError):
    """The caller's deadline passed before the operation could run."""

    def __init__(self, message: str = "context deadline exceeded"):
        super().__init__(message)


class StorageError(TodoError):
    """Unexpected storage failure (e.g. identifier sequence exhausted)."""
