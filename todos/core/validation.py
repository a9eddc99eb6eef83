"""Record-level invariants checked before every create and update."""

from typing import Callable, List

from .exceptions import EmptyTitleError
from .types import TaskSchema

Rule = Callable[[TaskSchema], None]


def require_title(task: TaskSchema) -> None:
    if not task.title.strip():
        raise EmptyTitleError()


RULES: List[Rule] = [require_title]


def validate(task: TaskSchema) -> None:
    """Run every rule against ``task``.

    Pure and side-effect free. Raises the first rule's
    ``ValidationError`` subclass on failure.
    """
    for rule in RULES:
        rule(task)
