"""Board state repository protocol."""

from typing import Protocol

from domain.entities.state import TasksState


class IStateRepository(Protocol):
    """Repository interface for the persisted board state."""

    def load(self) -> TasksState | None:
        """Load the saved state, or None when nothing usable is stored."""
        ...

    def save(self, state: TasksState) -> None:
        """Overwrite the saved state."""
        ...
