"""Manual reordering of the displayed task list."""

from collections.abc import Sequence
from dataclasses import replace
from typing import TypeVar

from domain.entities.task import Task

T = TypeVar("T")


def move_item(items: Sequence[T], source: int, destination: int) -> list[T]:
    """Move the item at ``source`` so that it ends up at ``destination``.

    Both indices refer to positions in ``items``; an index outside the
    sequence raises ``IndexError``.
    """
    size = len(items)
    if not 0 <= source < size:
        raise IndexError(f"source index {source} out of range for {size} items")
    if not 0 <= destination < size:
        raise IndexError(f"destination index {destination} out of range for {size} items")

    result = list(items)
    moved = result.pop(source)
    result.insert(destination, moved)
    return result


def manual_order(tasks: Sequence[Task]) -> list[Task]:
    """Tasks by ``position``, storage order breaking ties."""
    return [task for _, task in sorted(enumerate(tasks), key=lambda p: (p[1].position, p[0]))]


def build_reorder(
    tasks: Sequence[Task],
    displayed: Sequence[Task],
    source: int,
    destination: int,
) -> list[Task]:
    """Return the whole task collection after a drag within ``displayed``.

    ``displayed`` is the filtered/sorted list the move happened in. The
    moved subset is written back into the slots it occupies in the manual
    order, so hidden tasks keep their relative place, and every task gets a
    dense position 0..N-1.
    """
    reordered = move_item(displayed, source, destination)
    # Current versions from the collection win over whatever the view held;
    # tasks deleted since the view was computed are dropped.
    current = {task.id: task for task in tasks}
    moved = [current[task.id] for task in reordered if task.id in current]
    displayed_ids = {task.id for task in moved}
    queue = iter(moved)

    merged: list[Task] = []
    for task in manual_order(tasks):
        merged.append(next(queue) if task.id in displayed_ids else task)

    return [
        task if task.position == index else replace(task, position=index)
        for index, task in enumerate(merged)
    ]
