"""Derived projections kept in step with the store."""

from collections.abc import Callable
from dataclasses import replace
from datetime import date

from domain.entities.state import TasksState
from domain.entities.tag import Tag
from domain.entities.task import Task
from domain.services.analytics import TaskAnalytics, compute_analytics
from domain.services.task_store import TaskStore
from domain.services.task_view import SortKey, StatusFilter, ViewFilters, filter_and_sort


class BoardView:
    """Filtered task list and analytics for one view of the board.

    Recomputed whenever the store emits a new state or a filter changes.
    """

    def __init__(
        self,
        store: TaskStore,
        filters: ViewFilters | None = None,
        today_factory: Callable[[], date] = date.today,
    ) -> None:
        self._store = store
        self._filters = filters or ViewFilters()
        self._today_factory = today_factory
        self._tasks = filter_and_sort(store.state.tasks, self._filters)
        self._analytics: TaskAnalytics = compute_analytics(store.state.tasks, today_factory())
        self._unsubscribe = store.subscribe(self._refresh)

    @property
    def filters(self) -> ViewFilters:
        return self._filters

    @property
    def tasks(self) -> list[Task]:
        """Tasks to display, in display order."""
        return list(self._tasks)

    @property
    def analytics(self) -> TaskAnalytics:
        return self._analytics

    def set_search(self, query: str) -> None:
        self._update_filters(search=query)

    def set_status(self, status: StatusFilter | str) -> None:
        self._update_filters(status=StatusFilter(status))

    def set_priority(self, priority: int | None) -> None:
        self._update_filters(priority=priority)

    def set_tag(self, tag_id: str | None) -> None:
        self._update_filters(tag_id=tag_id)

    def set_sort(self, sort_by: SortKey | str) -> None:
        self._update_filters(sort_by=SortKey(sort_by))

    def tags_for(self, task: Task) -> list[Tag]:
        """Tags attached to ``task``; ids with no matching tag are skipped."""
        state = self._store.state
        return [tag for tag in map(state.find_tag, task.tags) if tag is not None]

    def close(self) -> None:
        """Stop following the store."""
        self._unsubscribe()

    def _update_filters(self, **changes: object) -> None:
        self._filters = replace(self._filters, **changes)  # type: ignore[arg-type]
        self._refresh(self._store.state)

    def _refresh(self, state: TasksState) -> None:
        self._tasks = filter_and_sort(state.tasks, self._filters)
        self._analytics = compute_analytics(state.tasks, self._today_factory())
