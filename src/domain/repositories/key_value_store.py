"""Key-value store protocol."""

from typing import Protocol


class IKeyValueStore(Protocol):
    """A local store of named string slots."""

    def get(self, key: str) -> str | None:
        """Get the value of a slot, or None if it was never written."""
        ...

    def set(self, key: str, value: str) -> None:
        """Write a slot, replacing any previous value."""
        ...
