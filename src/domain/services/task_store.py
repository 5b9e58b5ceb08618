"""Single owner of the board state."""

from collections.abc import Callable

import structlog

from domain.entities.intent import Intent
from domain.entities.state import TasksState
from domain.services.transition import transition

logger = structlog.get_logger()

Listener = Callable[[TasksState], None]


class TaskStore:
    """Holds the current ``TasksState`` and funnels every change through ``transition``.

    Listeners are called synchronously, in subscription order, after each
    dispatch that produced a new state. A failing listener does not stop the
    others; the first error is re-raised once all of them have run, and the
    new state stays committed.
    """

    def __init__(self, initial_state: TasksState | None = None) -> None:
        self._state = initial_state if initial_state is not None else TasksState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> TasksState:
        return self._state

    def dispatch(self, intent: Intent) -> TasksState:
        """Apply ``intent`` and notify listeners if the state changed."""
        new_state = transition(self._state, intent)
        logger.debug(
            "intent_dispatched",
            intent=type(intent).__name__,
            changed=new_state is not self._state,
        )
        if new_state is self._state:
            return new_state

        self._state = new_state
        errors: list[Exception] = []
        for listener in list(self._listeners):
            try:
                listener(new_state)
            except Exception as e:
                logger.exception("listener_failed", listener=repr(listener))
                errors.append(e)
        if errors:
            raise errors[0]
        return new_state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; the returned callable removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
