import logging
from datetime import UTC, datetime
from typing import cast

import inject

from src.taskboard.domain.models import (
    Task,
    TaskCreate,
    TaskData,
    TaskPriority,
    TaskUpdate,
)
from src.taskboard.domain.repositories import StorageRepository
from src.taskboard.domain.rules import TaskRuleContext
from src.taskboard.domain.validation import (
    normalize_task_type,
    validate_new_task,
    validate_task_fields,
)

logger = logging.getLogger(__name__)


class TaskService:
    """Validates task requests, applies the type rules and persists the result."""

    def __init__(self, storage: StorageRepository | None = None) -> None:
        self._storage = storage or cast(
            StorageRepository, inject.instance(StorageRepository)
        )

    async def create_task(self, payload: TaskCreate) -> Task:
        """
        Create a task: fill defaults, run the rule for its type, then store it.
        """
        validate_new_task(payload.title, payload.type, payload.priority)

        task_data = TaskData(
            title=payload.title,
            description=payload.description or "",
            priority=payload.priority or TaskPriority.NORMAL,
            type=normalize_task_type(payload.type),
        )
        transformed = TaskRuleContext.for_type(task_data.type).transform(task_data)

        task = Task(
            **transformed.model_dump(),
            completed=False,
            created_at=datetime.now(UTC),
        )
        task.id = await self._storage.create_task(task)
        logger.info(
            "Task created",
            extra={"task_id": task.id, "type": task.type, "priority": task.priority.value},
        )
        return task

    async def list_tasks(self) -> list[Task]:
        return await self._storage.list_tasks()

    async def get_task(self, task_id: str) -> Task:
        return await self._storage.get_task(task_id)

    async def update_task(self, task_id: str, payload: TaskUpdate) -> Task:
        """Apply the fields set on ``payload``. The type rule is not re-applied."""
        validate_task_fields(title=payload.title, priority=payload.priority)

        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        if changes.get("priority"):
            changes["priority"] = TaskPriority(changes["priority"])
        else:
            changes.pop("priority", None)
        if not changes:
            return await self._storage.get_task(task_id)

        task = await self._storage.update_task(task_id, changes)
        logger.info("Task updated", extra={"task_id": task_id, "fields": sorted(changes)})
        return task

    async def delete_task(self, task_id: str) -> None:
        await self._storage.delete_task(task_id)
        logger.info("Task deleted", extra={"task_id": task_id})
