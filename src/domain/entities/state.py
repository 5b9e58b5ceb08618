"""Board state aggregate."""

from dataclasses import dataclass

from domain.entities.tag import Tag
from domain.entities.task import Task


@dataclass(frozen=True, slots=True)
class TasksState:
    """The whole board: tasks in storage order plus the tag collection.

    Display order is derived by the view pipeline and never stored here.
    """

    tasks: tuple[Task, ...] = ()
    tags: tuple[Tag, ...] = ()

    def find_task(self, task_id: str) -> Task | None:
        return next((t for t in self.tasks if t.id == task_id), None)

    def find_tag(self, tag_id: str) -> Tag | None:
        return next((t for t in self.tags if t.id == tag_id), None)
