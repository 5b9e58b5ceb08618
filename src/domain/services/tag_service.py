"""Tag service layer with business logic."""

from collections.abc import Callable
from dataclasses import replace
from uuid import uuid4

import structlog

from core.exceptions import TagNotFoundError, ValidationError
from domain.entities.intent import AddTag, DeleteTag, EditTag
from domain.entities.tag import DEFAULT_TAG_COLOR, HEX_COLOR_RE, Tag
from domain.services.task_store import TaskStore

logger = structlog.get_logger()


def _new_id() -> str:
    return str(uuid4())


class TagService:
    """Service layer for Tag business logic."""

    def __init__(self, store: TaskStore, id_factory: Callable[[], str] = _new_id) -> None:
        self._store = store
        self._id_factory = id_factory

    def get_all(self) -> list[Tag]:
        return list(self._store.state.tags)

    def get_by_id(self, tag_id: str) -> Tag:
        """Get a specific tag."""
        tag = self._store.state.find_tag(tag_id)
        if tag is None:
            raise TagNotFoundError(tag_id)
        return tag

    def usage_count(self, tag_id: str) -> int:
        """Number of tasks carrying the tag."""
        return sum(1 for task in self._store.state.tasks if task.has_tag(tag_id))

    def create(self, name: str, color: str = DEFAULT_TAG_COLOR) -> Tag:
        """Create a new tag."""
        tag = Tag(
            id=self._id_factory(),
            name=self._clean_name(name),
            color=self._clean_color(color),
        )
        self._store.dispatch(AddTag(tag))
        logger.info("tag_created", tag_id=tag.id, name=tag.name)
        return tag

    def update(self, tag_id: str, name: str | None = None, color: str | None = None) -> Tag:
        """Update an existing tag."""
        tag = self.get_by_id(tag_id)

        if name is not None:
            tag = replace(tag, name=self._clean_name(name))
        if color is not None:
            tag = replace(tag, color=self._clean_color(color))

        self._store.dispatch(EditTag(tag))
        logger.info("tag_updated", tag_id=tag_id)
        return tag

    def delete(self, tag_id: str) -> None:
        """Delete a tag and detach it from every task."""
        detached = self.usage_count(tag_id)
        self._store.dispatch(DeleteTag(tag_id))
        logger.info("tag_deleted", tag_id=tag_id, detached_from=detached)

    @staticmethod
    def _clean_name(name: str) -> str:
        cleaned = (name or "").strip()
        if not cleaned:
            raise ValidationError("Tag name must not be empty", field="name")
        return cleaned

    @staticmethod
    def _clean_color(color: str) -> str:
        match = HEX_COLOR_RE.match((color or "").strip())
        if not match:
            raise ValidationError(f"Invalid color: {color!r}", field="color")
        return f"#{match.group(1).lower()}"
