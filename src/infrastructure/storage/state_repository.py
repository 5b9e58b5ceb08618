"""Key-value implementation of the state repository."""

import structlog
from pydantic import ValidationError as PydanticValidationError

from domain.entities.state import TasksState
from domain.repositories.key_value_store import IKeyValueStore
from infrastructure.storage.schemas import StateRecord

logger = structlog.get_logger()


class KeyValueStateRepository:
    """Stores the whole board as JSON under one key-value slot."""

    def __init__(self, store: IKeyValueStore, key: str) -> None:
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> TasksState | None:
        """Load and rehydrate the saved board.

        A missing slot and an unreadable one both yield None; the latter is
        logged so the caller can fall back to its default state.
        """
        try:
            raw = self._store.get(self._key)
            if raw is None:
                return None
            record = StateRecord.model_validate_json(raw)
        except PydanticValidationError as e:
            logger.error(
                "state_load_failed",
                key=self._key,
                error_count=e.error_count(),
                error=str(e),
            )
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.error("state_load_failed", key=self._key, error=str(e))
            return None

        state = record.to_entity()
        logger.info(
            "state_loaded", key=self._key, tasks=len(state.tasks), tags=len(state.tags)
        )
        return state

    def save(self, state: TasksState) -> None:
        """Serialize the full board and overwrite the slot."""
        payload = StateRecord.from_entity(state).model_dump_json(by_alias=True)
        self._store.set(self._key, payload)
        logger.debug("state_saved", key=self._key, tasks=len(state.tasks))
