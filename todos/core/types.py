from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Identifiers are unsigned 64-bit integers; 0 asks storage to assign one.
MAX_ID = 2**64 - 1


class TaskSchema(BaseModel):
    """Mutable fields of a task, as held by the storage engine."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str = Field(..., description="Task title, must not be blank")
    description: str = Field("", description="Free-form task description")
    is_done: bool = Field(False, description="Completion flag")


class Task(TaskSchema):
    """A stored task together with its identifier."""

    id: int = Field(..., ge=0, le=MAX_ID, description="Storage-assigned identifier")

    @classmethod
    def from_schema(cls, task_id: int, schema: TaskSchema) -> "Task":
        return cls(
            id=task_id,
            title=schema.title,
            description=schema.description,
            is_done=schema.is_done,
        )


def describe(task: Optional[TaskSchema]) -> str:
    """Short representation used in log lines."""
    if task is None:
        return "<none>"
    title = task.title if len(task.title) <= 40 else task.title[:37] + "..."
    return f"title={title!r} done={task.is_done}"
