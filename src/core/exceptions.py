"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the task board."""

    # Not found errors
    TASK_NOT_FOUND = "TASK_NOT_FOUND"
    TAG_NOT_FOUND = "TAG_NOT_FOUND"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Storage errors
    STORAGE_ERROR = "STORAGE_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """Input rejected before any intent was built."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=message,
            details={"field": field} if field else None,
        )


class TaskNotFoundError(AppException):
    """Task not found."""

    def __init__(self, task_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.TASK_NOT_FOUND,
            message=f"Task not found: {task_id}",
            details={"task_id": task_id},
        )


class TagNotFoundError(AppException):
    """Tag not found."""

    def __init__(self, tag_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.TAG_NOT_FOUND,
            message=f"Tag not found: {tag_id}",
            details={"tag_id": tag_id},
        )


class StorageError(AppException):
    """Writing to the key-value store failed."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(
            error_code=ErrorCode.STORAGE_ERROR,
            message=f"Could not write storage slot '{key}': {reason}",
            details={"key": key},
        )
