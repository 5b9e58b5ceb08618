"""Completion analytics over the full task set."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from domain.entities.task import Priority, Task, is_valid_priority


@dataclass(frozen=True, slots=True)
class TaskAnalytics:
    """Read-only value object: aggregate counts for the analytics tab."""

    total_tasks: int
    completed_tasks: int
    completion_rate: float
    overdue_tasks: int
    due_today_tasks: int
    upcoming_tasks: int
    priority_distribution: tuple[int, int, int, int, int]

    def priority_share(self, priority: int) -> float:
        """Percentage of all tasks that have ``priority`` (0.0 when empty)."""
        if not is_valid_priority(priority) or self.total_tasks == 0:
            return 0.0
        return self.priority_distribution[priority - 1] / self.total_tasks * 100


def local_date(value: datetime) -> date:
    """Calendar day of a timestamp, in local time for offset-aware values."""
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.date()


def compute_analytics(tasks: Iterable[Task], today: date) -> TaskAnalytics:
    """Aggregate counts for ``tasks`` as seen on ``today``.

    Due dates are compared by calendar day only; completed tasks never
    count as overdue, due today or upcoming.
    """
    total = completed = overdue = due_today = upcoming = 0
    distribution = [0] * len(Priority)

    for task in tasks:
        total += 1
        if is_valid_priority(task.priority):
            distribution[task.priority - 1] += 1

        if task.completed:
            completed += 1
            continue

        due = local_date(task.due_date)
        if due < today:
            overdue += 1
        elif due == today:
            due_today += 1
        else:
            upcoming += 1

    rate = completed / total * 100 if total > 0 else 0.0

    return TaskAnalytics(
        total_tasks=total,
        completed_tasks=completed,
        completion_rate=rate,
        overdue_tasks=overdue,
        due_today_tasks=due_today,
        upcoming_tasks=upcoming,
        priority_distribution=tuple(distribution),  # type: ignore[arg-type]
    )
