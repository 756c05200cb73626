from __future__ import annotations

from typing import Any

from src.taskboard.domain.exceptions import TaskValidationError
from src.taskboard.domain.models.task_priority import TaskPriority
from src.taskboard.domain.models.task_type import TaskType

VALID_TYPES: tuple[str, ...] = tuple(t.value for t in TaskType)
VALID_PRIORITIES: tuple[str, ...] = tuple(p.value for p in TaskPriority)


def normalize_task_type(task_type: Any) -> str:
    """Trim and lowercase a type tag. Anything that is not a string becomes ``""``."""
    if not isinstance(task_type, str):
        return ""
    return task_type.strip().lower()


def is_valid_priority(priority: Any) -> bool:
    return priority in VALID_PRIORITIES


def is_valid_type(task_type: Any) -> bool:
    return normalize_task_type(task_type) in VALID_TYPES


def validate_task_fields(
    *,
    title: str | None = None,
    priority: str | None = None,
    task_type: str | None = None,
) -> None:
    """Check the fields that are present; ``None`` (and an empty priority) means "not provided"."""
    if task_type is not None and not is_valid_type(task_type):
        raise TaskValidationError(f"Invalid task type: {task_type}")
    if priority and not is_valid_priority(priority):
        raise TaskValidationError(f"Invalid priority: {priority}")
    if title is not None and not title.strip():
        raise TaskValidationError("Title cannot be empty")


def validate_new_task(
    title: str | None, task_type: str | None, priority: str | None = None
) -> None:
    if not title or not task_type:
        raise TaskValidationError("Title and type are required")
    validate_task_fields(title=title, priority=priority, task_type=task_type)
