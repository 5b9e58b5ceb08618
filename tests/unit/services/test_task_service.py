"""Unit tests for TaskService."""

from datetime import datetime, timedelta, timezone
from itertools import count

import pytest

from core.exceptions import ErrorCode, TaskNotFoundError, ValidationError
from domain.entities.intent import DeleteTask
from domain.entities.state import TasksState
from domain.services.task_service import TaskService
from domain.services.task_store import TaskStore
from domain.services.task_view import StatusFilter, ViewFilters, filter_and_sort
from tests.conftest import NOW


@pytest.fixture
def store(state: TasksState) -> TaskStore:
    return TaskStore(state)


@pytest.fixture
def service(store: TaskStore) -> TaskService:
    ids = count(100)
    return TaskService(store, clock=lambda: NOW, id_factory=lambda: str(next(ids)))


# --- create ---


class TestCreate:
    def test_creates_task(self, service: TaskService, store: TaskStore):
        due = NOW + timedelta(days=2)

        task = service.create("  Write tests  ", "pytest", due_date=due, priority=5, tags=["1"])

        assert task.id == "100"
        assert task.name == "Write tests"
        assert task.due_date == due
        assert task.created_at == NOW
        assert task.completed is False
        assert task.completed_at is None
        assert task.position == 4
        assert store.state.tasks[-1] == task

    def test_defaults(self, service: TaskService):
        task = service.create("Quick one")

        assert task.priority == 3
        assert task.due_date == NOW
        assert task.description == ""
        assert task.tags == ()

    def test_empty_name_dispatches_nothing(self, service: TaskService, store: TaskStore):
        before = store.state

        with pytest.raises(ValidationError) as exc_info:
            service.create("   ")

        assert exc_info.value.error_code == ErrorCode.VALIDATION_ERROR
        assert store.state is before
        assert len(store.state.tasks) == 4

    @pytest.mark.parametrize("priority", [0, 6, True])
    def test_rejects_invalid_priority(self, service: TaskService, priority: int):
        with pytest.raises(ValidationError):
            service.create("Task", priority=priority)

    def test_normalizes_aware_due_date(self, service: TaskService):
        due = datetime(2026, 3, 12, 9, 0, tzinfo=timezone.utc)

        task = service.create("Call", due_date=due)

        assert task.due_date.tzinfo is None
        assert task.due_date == due.astimezone().replace(tzinfo=None)


# --- toggle ---


class TestToggle:
    def test_completes(self, service: TaskService):
        task = service.toggle("1")

        assert task.completed is True
        assert task.completed_at == NOW

    def test_toggle_twice(self, service: TaskService):
        service.toggle("2")
        task = service.toggle("2")

        assert task.completed is False
        assert task.completed_at is None

    def test_unknown_raises(self, service: TaskService):
        with pytest.raises(TaskNotFoundError):
            service.toggle("missing")

    def test_task_removed_by_listener_raises(self, service: TaskService, store: TaskStore):
        store.subscribe(lambda s: s.find_task("1") and store.dispatch(DeleteTask("1")))

        with pytest.raises(TaskNotFoundError):
            service.toggle("1")

        assert store.state.find_task("1") is None


# --- update ---


class TestUpdate:
    def test_updates_fields(self, service: TaskService, store: TaskStore):
        task = service.update("1", name="Ship it", priority=1, tags=["2", "2"])

        assert task.name == "Ship it"
        assert task.priority == 1
        assert task.tags == ("2",)
        assert store.state.find_task("1") == task

    def test_keeps_identity_fields(self, service: TaskService, state: TasksState):
        task = service.update("1", description="changed")

        original = state.find_task("1")
        assert task.id == original.id
        assert task.created_at == original.created_at
        assert task.position == original.position

    def test_rejects_immutable_fields(self, service: TaskService):
        with pytest.raises(ValidationError):
            service.update("1", created_at=NOW)

    def test_rejects_empty_name(self, service: TaskService, store: TaskStore):
        before = store.state

        with pytest.raises(ValidationError):
            service.update("1", name="")

        assert store.state is before

    def test_rejects_missing_due_date(self, service: TaskService):
        with pytest.raises(ValidationError):
            service.update("1", due_date=None)

    def test_completing_stamps_time(self, service: TaskService):
        task = service.update("1", completed=True)

        assert task.completed_at == NOW

    def test_uncompleting_clears_time(self, service: TaskService):
        task = service.update("3", completed=False)

        assert task.completed is False
        assert task.completed_at is None

    def test_completed_at_ignored_for_active_task(self, service: TaskService):
        task = service.update("1", completed_at=NOW)

        assert task.completed is False
        assert task.completed_at is None

    def test_unknown_raises(self, service: TaskService):
        with pytest.raises(TaskNotFoundError):
            service.update("missing", name="x")


# --- delete / reorder ---


class TestDelete:
    def test_deletes(self, service: TaskService, store: TaskStore):
        service.delete("2")

        assert store.state.find_task("2") is None

    def test_unknown_is_ignored(self, service: TaskService, store: TaskStore):
        service.delete("missing")

        assert len(store.state.tasks) == 4


class TestReorder:
    def test_reorders_whole_collection(self, service: TaskService, store: TaskStore):
        displayed = filter_and_sort(store.state.tasks, ViewFilters(status=StatusFilter.ACTIVE))

        service.reorder(displayed, 0, 2)

        assert len(store.state.tasks) == 4
        assert sorted(t.position for t in store.state.tasks) == [0, 1, 2, 3]

    def test_bad_index_dispatches_nothing(self, service: TaskService, store: TaskStore):
        before = store.state

        with pytest.raises(IndexError):
            service.reorder(list(store.state.tasks), 0, 10)

        assert store.state is before
