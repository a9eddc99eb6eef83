"""Task schemas for Todos Server."""

from typing import Any, List

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    field_validator,
)

from ....core.types import Task


class CreateTaskRequest(BaseModel):
    """Request model for creating a task.

    Missing or null fields fall back to empty values; any other wrongly typed
    value is rejected.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"title": "Buy milk", "description": "2 litres, skimmed"}
        }
    )

    title: StrictStr = Field("", description="Task title")
    description: StrictStr = Field("", description="Task description")

    @field_validator("title", "description", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class UpdateTaskRequest(BaseModel):
    """Request model for replacing a task.

    Every field is overwritten, so callers must resend unchanged ones too.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy milk",
                "description": "2 litres, skimmed",
                "is_done": True,
            }
        }
    )

    title: StrictStr = Field("", description="Task title")
    description: StrictStr = Field("", description="Task description")
    is_done: StrictBool = Field(False, description="Completion flag")

    @field_validator("title", "description", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("is_done", mode="before")
    @classmethod
    def _null_as_false(cls, value: Any) -> Any:
        return False if value is None else value


class TaskResponse(BaseModel):
    """Response model for task data."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Buy milk",
                "description": "2 litres, skimmed",
                "is_done": False,
            }
        }
    )

    id: int = Field(..., description="Task ID")
    title: str = Field(..., description="Task title")
    description: str = Field(..., description="Task description")
    is_done: bool = Field(..., description="Completion flag")

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            is_done=task.is_done,
        )


class TaskListResponse(BaseModel):
    """Response model for the task list."""

    tasks: List[TaskResponse] = Field(default_factory=list)
    total: int = Field(0, description="Number of tasks returned")

    @classmethod
    def from_tasks(cls, tasks: List[Task]) -> "TaskListResponse":
        responses = [TaskResponse.from_task(task) for task in tasks]
        return cls(tasks=responses, total=len(responses))
