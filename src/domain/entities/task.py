"""Task domain entity."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import IntEnum
from uuid import uuid4


class Priority(IntEnum):
    """Task priority. Higher value = more urgent."""

    VERY_LOW = 1
    LOW = 2
    MEDIUM = 3
    HIGH = 4
    VERY_HIGH = 5

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


def is_valid_priority(value: object) -> bool:
    """Check if a raw value is one of the five priority levels."""
    return isinstance(value, int) and not isinstance(value, bool) and (
        Priority.VERY_LOW <= value <= Priority.VERY_HIGH
    )


def to_local_naive(value: datetime) -> datetime:
    """Convert an offset-aware timestamp to naive local time.

    Board timestamps are naive local datetimes so that sorting and
    day comparisons never mix aware and naive values.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def priority_label(value: int) -> str:
    """Display label for a priority, "Unspecified" when out of range."""
    if is_valid_priority(value):
        return Priority(value).label
    return "Unspecified"


@dataclass(frozen=True, slots=True)
class Task:
    """Domain entity for a Task.

    Instances are immutable; every change goes through the transition
    function, which builds replacements with ``dataclasses.replace``.
    """

    name: str
    due_date: datetime
    created_at: datetime
    id: str = field(default_factory=lambda: str(uuid4()))
    description: str = ""
    completed: bool = False
    priority: int = Priority.MEDIUM
    tags: tuple[str, ...] = ()
    completed_at: datetime | None = None
    position: int = 0

    def __post_init__(self) -> None:
        """Collapse duplicate tag ids, keeping first-seen order."""
        object.__setattr__(self, "tags", tuple(dict.fromkeys(self.tags)))

    def toggled(self, now: datetime) -> "Task":
        """Return a copy with ``completed`` flipped and ``completed_at`` kept in step."""
        if self.completed:
            return replace(self, completed=False, completed_at=None)
        return replace(self, completed=True, completed_at=now)

    def without_tag(self, tag_id: str) -> "Task":
        if tag_id not in self.tags:
            return self
        return replace(self, tags=tuple(t for t in self.tags if t != tag_id))

    def has_tag(self, tag_id: str) -> bool:
        return tag_id in self.tags
