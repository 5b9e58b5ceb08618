"""Pytest configuration and fixtures."""

import os
import sys
from datetime import datetime, timedelta
from pathlib import Path

# Keep settings independent of any developer .env
os.environ.setdefault("STORAGE_BACKEND", "memory")

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.entities.state import TasksState
from domain.entities.tag import Tag
from domain.entities.task import Task

# Fixed clock for consistent dates
NOW = datetime(2026, 3, 10, 14, 30, 0)
DAY = timedelta(days=1)


def make_task(
    id: str,
    name: str = "Task",
    priority: int = 3,
    completed: bool = False,
    due_in_days: int = 1,
    created_days_ago: int = 1,
    tags: tuple[str, ...] = (),
    description: str = "",
    position: int = 0,
) -> Task:
    """Build a task dated relative to NOW."""
    return Task(
        id=id,
        name=name,
        description=description,
        due_date=NOW + due_in_days * DAY,
        completed=completed,
        completed_at=NOW - DAY if completed else None,
        priority=priority,
        tags=tags,
        created_at=NOW - created_days_ago * DAY,
        position=position,
    )


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def tags() -> tuple[Tag, ...]:
    return (
        Tag(id="1", name="Work", color="#3b82f6"),
        Tag(id="2", name="Learning", color="#10b981"),
        Tag(id="3", name="Personal", color="#8b5cf6"),
    )


@pytest.fixture
def state(tags: tuple[Tag, ...]) -> TasksState:
    """Four tasks with priorities 4, 2, 3 (completed) and 5."""
    return TasksState(
        tasks=(
            make_task("1", "Complete React Project", priority=4, due_in_days=3,
                      created_days_ago=2, tags=("1",), position=0),
            make_task("2", "Read React Hooks Book", priority=2, due_in_days=7,
                      created_days_ago=5, tags=("2", "3"), position=1),
            make_task("3", "Update Resume", priority=3, completed=True, due_in_days=-2,
                      created_days_ago=10, tags=("3",), position=2),
            make_task("4", "Prepare for Interview", priority=5, due_in_days=1,
                      created_days_ago=3, tags=("1", "3"), position=3),
        ),
        tags=tags,
    )
