"""Task service layer with business logic."""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import replace
from datetime import datetime
from typing import Any
from uuid import uuid4

import structlog

from core.exceptions import TaskNotFoundError, ValidationError
from domain.entities.intent import AddTask, DeleteTask, EditTask, ReorderTasks, ToggleTask
from domain.entities.task import Priority, Task, is_valid_priority, to_local_naive
from domain.services.reorder import build_reorder
from domain.services.task_store import TaskStore

logger = structlog.get_logger()

# Fields a caller may change through update(); id and created_at never change.
EDITABLE_FIELDS = frozenset(
    {"name", "description", "due_date", "priority", "tags", "completed", "completed_at"}
)


def _new_id() -> str:
    return str(uuid4())


class TaskService:
    """Service layer for Task business logic.

    Validates caller input and turns it into intents for the store. When
    validation fails nothing is dispatched and the state is untouched.
    """

    def __init__(
        self,
        store: TaskStore,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        self._store = store
        self._clock = clock
        self._id_factory = id_factory

    def get_by_id(self, task_id: str) -> Task:
        """Get a specific task."""
        task = self._store.state.find_task(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def create(
        self,
        name: str,
        description: str = "",
        due_date: datetime | None = None,
        priority: int = Priority.MEDIUM,
        tags: Iterable[str] = (),
    ) -> Task:
        """Create a new task at the end of the collection."""
        now = self._clock()
        task = Task(
            id=self._id_factory(),
            name=self._clean_name(name),
            description=description,
            due_date=to_local_naive(due_date or now),
            priority=self._check_priority(priority),
            tags=tuple(tags),
            created_at=now,
            position=len(self._store.state.tasks),
        )
        self._store.dispatch(AddTask(task))
        logger.info("task_created", task_id=task.id, priority=task.priority)
        return task

    def toggle(self, task_id: str) -> Task:
        """Flip completion of a task, stamping or clearing ``completed_at``."""
        self.get_by_id(task_id)
        self._store.dispatch(ToggleTask(task_id, self._clock()))
        toggled = self.get_by_id(task_id)
        logger.info("task_toggled", task_id=task_id, completed=toggled.completed)
        return toggled

    def update(self, task_id: str, **changes: Any) -> Task:
        """Replace a task with an edited copy.

        Accepts any of ``EDITABLE_FIELDS``. Completion fields are kept
        consistent: setting ``completed`` stamps or clears ``completed_at``.
        """
        task = self.get_by_id(task_id)

        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValidationError(
                f"Cannot update field(s): {', '.join(sorted(unknown))}",
                field=sorted(unknown)[0],
            )

        if "name" in changes:
            changes["name"] = self._clean_name(changes["name"])
        if "priority" in changes:
            changes["priority"] = self._check_priority(changes["priority"])
        if "tags" in changes:
            changes["tags"] = tuple(changes["tags"])
        if changes.get("due_date") is not None:
            changes["due_date"] = to_local_naive(changes["due_date"])
        elif "due_date" in changes:
            raise ValidationError("Due date is required", field="due_date")

        if "completed" in changes or "completed_at" in changes:
            completed = bool(changes.get("completed", task.completed))
            changes["completed"] = completed
            if completed:
                changes["completed_at"] = (
                    changes.get("completed_at") or task.completed_at or self._clock()
                )
            else:
                changes["completed_at"] = None

        updated = replace(task, **changes)
        self._store.dispatch(EditTask(updated))
        logger.info("task_updated", task_id=task_id, fields=sorted(changes))
        return updated

    def delete(self, task_id: str) -> None:
        """Delete a task. Unknown ids are ignored."""
        self._store.dispatch(DeleteTask(task_id))
        logger.info("task_deleted", task_id=task_id)

    def reorder(self, displayed: Sequence[Task], source: int, destination: int) -> list[Task]:
        """Move a task within the displayed list and renumber every position."""
        tasks = build_reorder(self._store.state.tasks, displayed, source, destination)
        self._store.dispatch(ReorderTasks(tasks))
        logger.info("tasks_reordered", source=source, destination=destination)
        return tasks

    @staticmethod
    def _clean_name(name: str) -> str:
        cleaned = (name or "").strip()
        if not cleaned:
            raise ValidationError("Task name must not be empty", field="name")
        return cleaned

    @staticmethod
    def _check_priority(priority: int) -> int:
        if not is_valid_priority(priority):
            raise ValidationError(
                f"Priority must be between {int(Priority.VERY_LOW)} and "
                f"{int(Priority.VERY_HIGH)}",
                field="priority",
            )
        return int(priority)
