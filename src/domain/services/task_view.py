"""Filtering and sorting of tasks for display."""

import unicodedata
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from domain.entities.task import Task


class StatusFilter(StrEnum):
    """Which completion states to show."""

    ALL = "all"
    COMPLETED = "completed"
    ACTIVE = "active"


class SortKey(StrEnum):
    """Display ordering. Values match the keys used by the original UI."""

    DUE_DATE = "dueDate"
    PRIORITY = "priority"
    NAME = "name"
    CREATED_AT = "createdAt"
    POSITION = "position"


@dataclass(frozen=True, slots=True)
class ViewFilters:
    """View-local filter and sort parameters."""

    search: str = ""
    status: StatusFilter = StatusFilter.ALL
    priority: int | None = None
    tag_id: str | None = None
    sort_by: SortKey = SortKey.DUE_DATE


def name_sort_key(name: str) -> tuple[str, str]:
    """Locale-style collation key: accents and case only break ties."""
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), name)


# (key function, descending)
_SORTS: dict[SortKey, tuple[Callable[[Task], Any], bool]] = {
    SortKey.DUE_DATE: (lambda t: t.due_date, False),
    SortKey.PRIORITY: (lambda t: t.priority, True),
    SortKey.NAME: (lambda t: name_sort_key(t.name), False),
    SortKey.CREATED_AT: (lambda t: t.created_at, True),
    SortKey.POSITION: (lambda t: t.position, False),
}


def matches_search(task: Task, query: str) -> bool:
    """Case-insensitive substring match on name or description.

    Surrounding whitespace is ignored, so a blank query matches everything.
    """
    needle = query.strip().lower()
    if not needle:
        return True
    return needle in task.name.lower() or needle in task.description.lower()


def filter_and_sort(tasks: Iterable[Task], filters: ViewFilters) -> list[Task]:
    """Apply search, status, priority and tag filters, then sort.

    Stages run in that fixed order. Sorting is stable, so tasks that tie on
    the sort key keep their incoming relative order.
    """
    result = [t for t in tasks if matches_search(t, filters.search)]

    status = StatusFilter(filters.status)
    if status is StatusFilter.COMPLETED:
        result = [t for t in result if t.completed]
    elif status is StatusFilter.ACTIVE:
        result = [t for t in result if not t.completed]

    if filters.priority is not None:
        result = [t for t in result if t.priority == filters.priority]

    if filters.tag_id is not None:
        result = [t for t in result if t.has_tag(filters.tag_id)]

    key, descending = _SORTS[SortKey(filters.sort_by)]
    # sorted(reverse=True) keeps equal elements in their original order
    return sorted(result, key=key, reverse=descending)
