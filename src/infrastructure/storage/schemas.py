"""Pydantic records for the persisted board layout.

Field names on disk are camelCase to stay compatible with the layout the
browser version wrote to local storage.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from domain.entities.state import TasksState
from domain.entities.tag import Tag
from domain.entities.task import Task, to_local_naive


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class TagRecord(_Record):
    """Persisted form of a Tag."""

    id: str
    name: str
    color: str

    @classmethod
    def from_entity(cls, tag: Tag) -> "TagRecord":
        return cls(id=tag.id, name=tag.name, color=tag.color)

    def to_entity(self) -> Tag:
        return Tag(id=self.id, name=self.name, color=self.color)


class TaskRecord(_Record):
    """Persisted form of a Task."""

    id: str
    name: str
    description: str = ""
    due_date: datetime
    completed: bool = False
    priority: int
    tags: list[str] = Field(default_factory=list)
    created_at: datetime
    completed_at: datetime | None = None
    position: int = 0

    @field_validator("due_date", "created_at", "completed_at")
    @classmethod
    def normalize_timestamp(cls, v: datetime | None) -> datetime | None:
        return to_local_naive(v) if v is not None else None

    @classmethod
    def from_entity(cls, task: Task) -> "TaskRecord":
        return cls(
            id=task.id,
            name=task.name,
            description=task.description,
            due_date=task.due_date,
            completed=task.completed,
            priority=int(task.priority),
            tags=list(task.tags),
            created_at=task.created_at,
            completed_at=task.completed_at,
            position=task.position,
        )

    def to_entity(self) -> Task:
        return Task(
            id=self.id,
            name=self.name,
            description=self.description,
            due_date=self.due_date,
            completed=self.completed,
            priority=self.priority,
            tags=tuple(self.tags),
            created_at=self.created_at,
            completed_at=self.completed_at,
            position=self.position,
        )


class StateRecord(_Record):
    """Persisted form of the whole board."""

    tasks: list[TaskRecord] = Field(default_factory=list)
    tags: list[TagRecord] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, state: TasksState) -> "StateRecord":
        return cls(
            tasks=[TaskRecord.from_entity(task) for task in state.tasks],
            tags=[TagRecord.from_entity(tag) for tag in state.tags],
        )

    def to_entity(self) -> TasksState:
        return TasksState(
            tasks=tuple(record.to_entity() for record in self.tasks),
            tags=tuple(record.to_entity() for record in self.tags),
        )
