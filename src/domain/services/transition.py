"""State transition function for the task board."""

from dataclasses import replace

from domain.entities.intent import (
    AddTag,
    AddTask,
    DeleteTag,
    DeleteTask,
    EditTag,
    EditTask,
    Intent,
    ReorderTasks,
    ReplaceAll,
    ToggleTask,
)
from domain.entities.state import TasksState


def transition(state: TasksState, intent: Intent) -> TasksState:
    """Apply one intent and return the resulting state.

    Pure: the input state is never modified. Intents that reference a
    missing id, and intent kinds this function does not know, leave the
    state unchanged instead of raising.
    """
    if isinstance(intent, AddTask):
        return replace(state, tasks=(*state.tasks, intent.task))

    if isinstance(intent, ToggleTask):
        if state.find_task(intent.task_id) is None:
            return state
        return replace(
            state,
            tasks=tuple(
                task.toggled(intent.now) if task.id == intent.task_id else task
                for task in state.tasks
            ),
        )

    if isinstance(intent, DeleteTask):
        if state.find_task(intent.task_id) is None:
            return state
        return replace(
            state, tasks=tuple(task for task in state.tasks if task.id != intent.task_id)
        )

    if isinstance(intent, EditTask):
        if state.find_task(intent.task.id) is None:
            return state
        return replace(
            state,
            tasks=tuple(
                intent.task if task.id == intent.task.id else task for task in state.tasks
            ),
        )

    if isinstance(intent, ReplaceAll):
        return intent.state

    if isinstance(intent, ReorderTasks):
        return replace(state, tasks=tuple(intent.tasks))

    if isinstance(intent, AddTag):
        return replace(state, tags=(*state.tags, intent.tag))

    if isinstance(intent, EditTag):
        if state.find_tag(intent.tag.id) is None:
            return state
        return replace(
            state,
            tags=tuple(intent.tag if tag.id == intent.tag.id else tag for tag in state.tags),
        )

    if isinstance(intent, DeleteTag):
        if state.find_tag(intent.tag_id) is None and not any(
            task.has_tag(intent.tag_id) for task in state.tasks
        ):
            return state
        return TasksState(
            tasks=tuple(task.without_tag(intent.tag_id) for task in state.tasks),
            tags=tuple(tag for tag in state.tags if tag.id != intent.tag_id),
        )

    return state
