"""Built-in demo board used when nothing has been saved yet."""

from datetime import datetime, timedelta

from domain.entities.state import TasksState
from domain.entities.tag import Tag
from domain.entities.task import Priority, Task


def seed_state(now: datetime) -> TasksState:
    """Four sample tasks and three tags, dated relative to ``now``."""
    day = timedelta(days=1)
    tags = (
        Tag(id="1", name="Work", color="#3b82f6"),
        Tag(id="2", name="Learning", color="#10b981"),
        Tag(id="3", name="Personal", color="#8b5cf6"),
    )
    tasks = (
        Task(
            id="1",
            name="Complete React Project",
            description="Finish developing the advanced task manager component",
            due_date=now + 3 * day,
            priority=Priority.HIGH,
            tags=("1",),
            created_at=now - 2 * day,
            position=0,
        ),
        Task(
            id="2",
            name="Read React Hooks Book",
            description="Read chapters 3-5 of the book",
            due_date=now + 7 * day,
            priority=Priority.LOW,
            tags=("2",),
            created_at=now - 5 * day,
            position=1,
        ),
        Task(
            id="3",
            name="Update Resume",
            description="Add new skills and projects",
            due_date=now - 2 * day,
            completed=True,
            priority=Priority.MEDIUM,
            tags=("3",),
            created_at=now - 10 * day,
            completed_at=now - day,
            position=2,
        ),
        Task(
            id="4",
            name="Prepare for Interview",
            description="Research company and practice common questions",
            due_date=now + day,
            priority=Priority.VERY_HIGH,
            tags=("1", "3"),
            created_at=now - 3 * day,
            position=3,
        ),
    )
    return TasksState(tasks=tasks, tags=tags)
