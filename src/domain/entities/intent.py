"""Intents accepted by the transition function.

Each intent is an immutable description of one state change. Preconditions
(non-empty names, existing ids) are checked by the services that build them.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from domain.entities.state import TasksState
from domain.entities.tag import Tag
from domain.entities.task import Task


@dataclass(frozen=True, slots=True)
class AddTask:
    task: Task


@dataclass(frozen=True, slots=True)
class ToggleTask:
    task_id: str
    now: datetime


@dataclass(frozen=True, slots=True)
class DeleteTask:
    task_id: str


@dataclass(frozen=True, slots=True)
class EditTask:
    task: Task


@dataclass(frozen=True, slots=True)
class ReplaceAll:
    state: TasksState


@dataclass(frozen=True, slots=True)
class ReorderTasks:
    """Replace the task collection with ``tasks`` (positions already assigned)."""

    tasks: Sequence[Task]


@dataclass(frozen=True, slots=True)
class AddTag:
    tag: Tag


@dataclass(frozen=True, slots=True)
class EditTag:
    tag: Tag


@dataclass(frozen=True, slots=True)
class DeleteTag:
    tag_id: str


Intent = (
    AddTask
    | ToggleTask
    | DeleteTask
    | EditTask
    | ReplaceAll
    | ReorderTasks
    | AddTag
    | EditTag
    | DeleteTag
)
