"""Application composition root."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

import structlog

from core.config import Settings, get_settings
from core.logging import setup_logging
from domain.entities.state import TasksState
from domain.repositories.key_value_store import IKeyValueStore
from domain.services.board_view import BoardView
from domain.services.seed import seed_state
from domain.services.tag_service import TagService
from domain.services.task_service import TaskService
from domain.services.task_store import TaskStore
from infrastructure.storage.key_value import FileKeyValueStore, InMemoryKeyValueStore
from infrastructure.storage.persistence import PersistenceBridge
from infrastructure.storage.state_repository import KeyValueStateRepository

logger = structlog.get_logger()


@dataclass
class TaskBoardApp:
    """Everything a presentation layer needs, owned by one root object."""

    settings: Settings
    store: TaskStore
    tasks: TaskService
    tags: TagService
    view: BoardView
    persistence: PersistenceBridge
    _detach: list[Callable[[], None]] = field(default_factory=list, repr=False)

    def close(self) -> None:
        """Stop saving and stop updating the view."""
        self.view.close()
        for detach in self._detach:
            detach()
        self._detach.clear()


def build_key_value_store(settings: Settings) -> IKeyValueStore:
    """Key-value backend selected by ``storage_backend``."""
    if settings.storage_backend == "memory":
        return InMemoryKeyValueStore()
    return FileKeyValueStore(settings.storage_dir)


def create_app(
    settings: Settings | None = None,
    kv_store: IKeyValueStore | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> TaskBoardApp:
    """Create and wire the task board."""
    settings = settings or get_settings()
    setup_logging(settings)

    repository = KeyValueStateRepository(
        kv_store if kv_store is not None else build_key_value_store(settings),
        settings.storage_key,
    )
    initial = seed_state(clock()) if settings.seed_on_empty else TasksState()
    store = TaskStore(initial)

    persistence = PersistenceBridge(repository)
    if not persistence.load_into(store) and settings.seed_on_empty:
        logger.info("seed_state_used", tasks=len(initial.tasks), tags=len(initial.tags))
    detach = persistence.attach(store)

    app = TaskBoardApp(
        settings=settings,
        store=store,
        tasks=TaskService(store, clock=clock),
        tags=TagService(store),
        view=BoardView(store, today_factory=lambda: clock().date()),
        persistence=persistence,
        _detach=[detach],
    )
    logger.info("app_started", storage_key=settings.storage_key, backend=settings.storage_backend)
    return app
