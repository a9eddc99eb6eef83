"""Task service for the Todos Server."""

from contextlib import contextmanager
from typing import Iterator, List, Optional

from loguru import logger

from ...core.context import Context
from ...core.exceptions import StorageError, TodoError
from ...core.types import Task, TaskSchema, describe
from ...core.validation import validate
from ...storage.base import StorageBackend


@contextmanager
def _storage_call(action: str) -> Iterator[None]:
    """Attach ``action`` to errors coming out of the storage backend.

    Core errors keep their type and gain a note; anything else is wrapped in
    ``StorageError``.
    """
    try:
        yield
    except TodoError as e:
        e.add_note(action)
        raise
    except Exception as e:
        raise StorageError(f"{action}: {e}") from e


class TaskService:
    """Service for managing tasks.

    Holds no state of its own besides the storage backend, so one instance
    can serve any number of concurrent requests.
    """

    def __init__(self, storage: StorageBackend[TaskSchema]):
        """Initialize task service."""
        self.storage = storage

    def create(
        self, title: str, description: str, ctx: Optional[Context] = None
    ) -> Task:
        """Validate and store a new, not yet completed task."""
        schema = TaskSchema(title=title, description=description, is_done=False)
        validate(schema)

        with _storage_call("failed to save task"):
            task_id = self.storage.save(schema, 0, ctx=ctx)

        logger.info("Created task {}: {}", task_id, describe(schema))
        return Task.from_schema(task_id, schema)

    def get_by_id(self, task_id: int, ctx: Optional[Context] = None) -> Task:
        """Get task by ID."""
        with _storage_call(f"failed to get task {task_id}"):
            schema = self.storage.get_by_id(task_id, ctx=ctx)
        return Task.from_schema(task_id, schema)

    def get_all(self, ctx: Optional[Context] = None) -> List[Task]:
        """List every stored task. Order is unspecified."""
        with _storage_call("failed to get tasks"):
            records = self.storage.get_all(ctx=ctx)
        return [Task.from_schema(record.id, record.value) for record in records]

    def update(
        self,
        task_id: int,
        title: str,
        description: str,
        is_done: bool,
        ctx: Optional[Context] = None,
    ) -> None:
        """Overwrite all mutable fields of an existing task.

        This is a full replacement, not a patch: callers resend every field.
        """
        with _storage_call(f"failed to get task {task_id}"):
            current = self.storage.get_by_id(task_id, ctx=ctx)

        updated = current.model_copy(
            update={"title": title, "description": description, "is_done": is_done}
        )
        validate(updated)

        with _storage_call(f"failed to update task {task_id}"):
            self.storage.save(updated, task_id, ctx=ctx)

        logger.info("Updated task {}: {}", task_id, describe(updated))

    def delete(self, task_id: int, ctx: Optional[Context] = None) -> None:
        """Delete a task."""
        with _storage_call(f"failed to delete task {task_id}"):
            self.storage.delete(task_id, ctx=ctx)
        logger.info("Deleted task {}", task_id)
