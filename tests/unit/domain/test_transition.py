"""Unit tests for the transition function."""

from dataclasses import dataclass

import pytest

from domain.entities.intent import (
    AddTag,
    AddTask,
    DeleteTag,
    DeleteTask,
    EditTag,
    EditTask,
    ReorderTasks,
    ReplaceAll,
    ToggleTask,
)
from domain.entities.state import TasksState
from domain.entities.tag import Tag
from domain.services.transition import transition
from tests.conftest import NOW, make_task


class TestAddTask:
    def test_appends_task(self, state: TasksState):
        task = make_task("5", "New")

        result = transition(state, AddTask(task))

        assert len(result.tasks) == 5
        assert result.tasks[-1] is task
        assert len(state.tasks) == 4

    def test_returns_new_collection(self, state: TasksState):
        result = transition(state, AddTask(make_task("5")))

        assert result is not state
        assert result.tasks is not state.tasks
        assert result.tags is state.tags


class TestToggleTask:
    def test_completes_and_stamps_time(self, state: TasksState):
        result = transition(state, ToggleTask("1", NOW))

        task = result.find_task("1")
        assert task.completed is True
        assert task.completed_at == NOW

    def test_uncompletes_and_clears_time(self, state: TasksState):
        result = transition(state, ToggleTask("3", NOW))

        task = result.find_task("3")
        assert task.completed is False
        assert task.completed_at is None

    def test_toggle_twice_restores_original(self, state: TasksState):
        once = transition(state, ToggleTask("2", NOW))
        twice = transition(once, ToggleTask("2", NOW))

        assert twice.find_task("2") == state.find_task("2")
        assert twice.find_task("2").completed_at is None

    def test_leaves_other_tasks_alone(self, state: TasksState):
        result = transition(state, ToggleTask("1", NOW))

        assert result.tasks[1:] == state.tasks[1:]

    def test_unknown_id_is_noop(self, state: TasksState):
        result = transition(state, ToggleTask("missing", NOW))

        assert result is state


class TestDeleteTask:
    def test_removes_task(self, state: TasksState):
        result = transition(state, DeleteTask("2"))

        assert [t.id for t in result.tasks] == ["1", "3", "4"]

    def test_unknown_id_is_noop(self, state: TasksState):
        result = transition(state, DeleteTask("missing"))

        assert result is state


class TestEditTask:
    def test_replaces_task_wholesale(self, state: TasksState):
        edited = make_task("2", "Renamed", priority=1)

        result = transition(state, EditTask(edited))

        assert result.find_task("2") is edited
        assert [t.id for t in result.tasks] == ["1", "2", "3", "4"]

    def test_unknown_id_is_noop(self, state: TasksState):
        result = transition(state, EditTask(make_task("missing")))

        assert result is state


class TestReplaceAll:
    def test_adopts_new_state(self, state: TasksState):
        replacement = TasksState(tasks=(make_task("9"),))

        result = transition(state, ReplaceAll(replacement))

        assert result is replacement


class TestReorderTasks:
    def test_replaces_collection(self, state: TasksState):
        reordered = list(reversed(state.tasks))

        result = transition(state, ReorderTasks(reordered))

        assert result.tasks == tuple(reordered)
        assert isinstance(result.tasks, tuple)


class TestTags:
    def test_add_tag(self, state: TasksState):
        tag = Tag(id="4", name="Errands")

        result = transition(state, AddTag(tag))

        assert result.tags[-1] is tag
        assert len(state.tags) == 3

    def test_edit_tag(self, state: TasksState):
        result = transition(state, EditTag(Tag(id="1", name="Job", color="#000000")))

        assert result.find_tag("1").name == "Job"
        assert len(result.tags) == 3

    def test_delete_tag_strips_references(self, state: TasksState):
        result = transition(state, DeleteTag("3"))

        assert result.find_tag("3") is None
        assert all("3" not in task.tags for task in result.tasks)
        assert result.find_task("4").tags == ("1",)

    def test_delete_tag_scenario(self):
        state = TasksState(
            tasks=(make_task("1", tags=("2", "3")),),
            tags=(Tag(id="2", name="Two"), Tag(id="3", name="Three")),
        )

        result = transition(state, DeleteTag("2"))

        assert result.find_task("1").tags == ("3",)
        assert [t.id for t in result.tags] == ["3"]

    def test_edit_unknown_tag_is_noop(self, state: TasksState):
        result = transition(state, EditTag(Tag(id="missing", name="Ghost")))

        assert result is state

    def test_delete_unknown_tag_is_noop(self, state: TasksState):
        assert transition(state, DeleteTag("missing")) is state

    def test_delete_dangling_tag_reference(self):
        state = TasksState(tasks=(make_task("1", tags=("gone",)),))

        result = transition(state, DeleteTag("gone"))

        assert result.find_task("1").tags == ()

    def test_delete_tag_does_not_touch_input(self, state: TasksState):
        before = state.find_task("4").tags

        transition(state, DeleteTag("1"))

        assert state.find_task("4").tags == before
        assert state.find_tag("1") is not None


class TestUnknownIntent:
    def test_returns_state_unchanged(self, state: TasksState):
        @dataclass
        class Rename:
            name: str

        result = transition(state, Rename("x"))  # type: ignore[arg-type]

        assert result is state


@pytest.mark.parametrize(
    "intent",
    [
        AddTask(make_task("5")),
        ToggleTask("1", NOW),
        DeleteTask("1"),
        EditTask(make_task("1", "Edited")),
        ReorderTasks([]),
        DeleteTag("1"),
    ],
)
def test_effecting_intents_never_mutate_input(state: TasksState, intent):
    snapshot = (state.tasks, state.tags)

    result = transition(state, intent)

    assert (state.tasks, state.tags) == snapshot
    assert result.tasks is not state.tasks
