from unittest.mock import MagicMock

import pytest
from todos.core.context import Context
from todos.core.exceptions import (
    CancelledError,
    DeadlineExceededError,
    EmptyTitleError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from todos.core.types import Task, TaskSchema
from todos.server.services.task_service import TaskService
from todos.storage.base import Record, StorageBackend
from todos.storage.memory import InMemoryStorage


class TestTaskServiceWithMockStorage:
    """Checks how the service drives the storage interface."""

    def setup_method(self):
        self.storage = MagicMock(spec=StorageBackend)
        self.service = TaskService(self.storage)

    def test_init_keeps_storage(self):
        assert self.service.storage is self.storage

    def test_create_saves_with_auto_id(self):
        self.storage.save.return_value = 42
        ctx = Context.background()

        task = self.service.create("Title", "Desc", ctx=ctx)

        assert task == Task(id=42, title="Title", description="Desc", is_done=False)
        self.storage.save.assert_called_once_with(
            TaskSchema(title="Title", description="Desc", is_done=False), 0, ctx=ctx
        )

    @pytest.mark.parametrize("title", ["", "   ", "\n\t"])
    def test_create_blank_title_never_reaches_storage(self, title):
        with pytest.raises(EmptyTitleError):
            self.service.create(title, "Desc")
        self.storage.save.assert_not_called()

    def test_create_storage_error_keeps_type_and_gains_context(self):
        self.storage.save.side_effect = DeadlineExceededError()

        with pytest.raises(DeadlineExceededError) as exc_info:
            self.service.create("Title", "Desc")

        assert "failed to save task" in exc_info.value.__notes__

    def test_unexpected_storage_failure_is_wrapped(self):
        self.storage.save.side_effect = MemoryError("out of memory")

        with pytest.raises(StorageError, match="failed to save task") as exc_info:
            self.service.create("Title", "Desc")

        assert isinstance(exc_info.value.__cause__, MemoryError)

    def test_get_by_id_attaches_requested_id(self):
        self.storage.get_by_id.return_value = TaskSchema(
            title="T", description="D", is_done=True
        )

        task = self.service.get_by_id(7)

        assert task == Task(id=7, title="T", description="D", is_done=True)
        self.storage.get_by_id.assert_called_once_with(7, ctx=None)

    def test_get_by_id_not_found(self):
        self.storage.get_by_id.side_effect = NotFoundError()
        with pytest.raises(NotFoundError):
            self.service.get_by_id(7)

    def test_get_all_maps_records(self):
        self.storage.get_all.return_value = [
            Record(id=2, value=TaskSchema(title="b", description="")),
            Record(id=1, value=TaskSchema(title="a", description="", is_done=True)),
        ]

        tasks = self.service.get_all()

        assert tasks == [
            Task(id=2, title="b", description="", is_done=False),
            Task(id=1, title="a", description="", is_done=True),
        ]

    def test_get_all_empty(self):
        self.storage.get_all.return_value = []
        assert self.service.get_all() == []

    def test_get_all_error_propagates(self):
        self.storage.get_all.side_effect = CancelledError()
        with pytest.raises(CancelledError) as exc_info:
            self.service.get_all()
        assert "failed to get tasks" in exc_info.value.__notes__

    def test_update_overwrites_every_field(self):
        self.storage.get_by_id.return_value = TaskSchema(
            title="old", description="old desc", is_done=False
        )

        self.service.update(5, "new", "", True)

        self.storage.save.assert_called_once_with(
            TaskSchema(title="new", description="", is_done=True), 5, ctx=None
        )

    def test_update_missing_task(self):
        self.storage.get_by_id.side_effect = NotFoundError()
        with pytest.raises(NotFoundError):
            self.service.update(5, "new", "desc", False)
        self.storage.save.assert_not_called()

    def test_update_blank_title_is_not_persisted(self):
        self.storage.get_by_id.return_value = TaskSchema(title="old", description="")
        with pytest.raises(ValidationError):
            self.service.update(5, "   ", "desc", True)
        self.storage.save.assert_not_called()

    def test_update_save_error_gains_context(self):
        self.storage.get_by_id.return_value = TaskSchema(title="old", description="")
        self.storage.save.side_effect = CancelledError()
        with pytest.raises(CancelledError) as exc_info:
            self.service.update(5, "new", "desc", True)
        assert "failed to update task 5" in exc_info.value.__notes__

    def test_delete_delegates(self):
        ctx = Context.background()
        self.service.delete(3, ctx=ctx)
        self.storage.delete.assert_called_once_with(3, ctx=ctx)

    def test_delete_not_found(self):
        self.storage.delete.side_effect = NotFoundError()
        with pytest.raises(NotFoundError):
            self.service.delete(3)


class TestTaskServiceWithMemoryStorage:
    """End-to-end behaviour against the real in-memory engine."""

    def setup_method(self):
        self.storage = InMemoryStorage[TaskSchema]()
        self.service = TaskService(self.storage)

    def test_round_trip(self):
        created = self.service.create("T", "D")
        fetched = self.service.get_by_id(created.id)
        assert fetched == Task(id=created.id, title="T", description="D", is_done=False)

    def test_ids_are_distinct_and_increasing(self):
        ids = [self.service.create(f"t{i}", "").id for i in range(20)]
        assert ids == sorted(ids)
        assert len(set(ids)) == 20

    def test_validation_gate_leaves_storage_unchanged(self):
        existing = self.service.create("keep", "D")
        before = self.service.get_all()

        with pytest.raises(ValidationError):
            self.service.create("", "D")
        with pytest.raises(ValidationError):
            self.service.update(existing.id, "   ", "D", True)

        assert self.service.get_all() == before
        assert self.service.get_by_id(existing.id) == existing

    def test_update_can_uncomplete(self):
        task = self.service.create("T", "D")
        self.service.update(task.id, "T", "D", True)
        assert self.service.get_by_id(task.id).is_done is True
        self.service.update(task.id, "T", "D", False)
        assert self.service.get_by_id(task.id).is_done is False

    def test_update_is_full_replacement(self):
        task = self.service.create("T", "keep me")
        self.service.update(task.id, "T2", "", False)
        assert self.service.get_by_id(task.id).description == ""

    def test_deletion_is_final(self):
        task = self.service.create("T", "D")
        self.service.delete(task.id)
        with pytest.raises(NotFoundError):
            self.service.get_by_id(task.id)
        with pytest.raises(NotFoundError):
            self.service.delete(task.id)
        with pytest.raises(NotFoundError):
            self.service.update(task.id, "T", "D", False)

    def test_get_all_on_empty_store(self):
        assert self.service.get_all() == []

    def test_cancelled_context_leaves_storage_unchanged(self):
        task = self.service.create("T", "D")
        ctx = Context.with_cancel()
        ctx.cancel()

        with pytest.raises(CancelledError):
            self.service.create("new", "D", ctx=ctx)
        with pytest.raises(CancelledError):
            self.service.update(task.id, "changed", "D", True, ctx=ctx)
        with pytest.raises(CancelledError):
            self.service.delete(task.id, ctx=ctx)
        with pytest.raises(CancelledError):
            self.service.get_all(ctx=ctx)

        assert self.service.get_all() == [task]
