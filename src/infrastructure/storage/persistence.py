"""Keeps the store and the state repository in step."""

from collections.abc import Callable

import structlog

from domain.entities.intent import ReplaceAll
from domain.entities.state import TasksState
from domain.repositories.state_repository import IStateRepository
from domain.services.task_store import TaskStore

logger = structlog.get_logger()


class PersistenceBridge:
    """Loads saved state into a store and saves every state it emits."""

    def __init__(self, repository: IStateRepository) -> None:
        self._repository = repository

    def load_into(self, store: TaskStore) -> bool:
        """Replace the store's state with the saved one, if there is any.

        Returns False when nothing usable was stored; the store then keeps
        whatever default state it was created with.
        """
        saved = self._repository.load()
        if saved is None:
            return False
        store.dispatch(ReplaceAll(saved))
        return True

    def attach(self, store: TaskStore) -> Callable[[], None]:
        """Save on every state change. Returns the unsubscribe callable."""
        return store.subscribe(self._save)

    def _save(self, state: TasksState) -> None:
        self._repository.save(state)
