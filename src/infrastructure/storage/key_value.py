"""Key-value store implementations."""

import os
import tempfile
from pathlib import Path

import structlog

from core.config import STORAGE_KEY_RE
from core.exceptions import StorageError

logger = structlog.get_logger()


class InMemoryKeyValueStore:
    """Dict-backed implementation of IKeyValueStore."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class FileKeyValueStore:
    """File-backed implementation of IKeyValueStore.

    Each slot is one ``<key>.json`` file in ``directory``. Writes go to a
    temporary file first and are moved into place with ``os.replace``, so a
    crash mid-write never leaves a half-written slot behind.
    """

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, key: str) -> Path:
        if not STORAGE_KEY_RE.fullmatch(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._directory, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error("storage_write_failed", key=key, path=str(path), error=str(e))
            raise StorageError(key, str(e)) from e
