from __future__ import annotations

from typing import Any
from uuid import uuid4

from src.taskboard.domain.exceptions import TaskNotFoundError
from src.taskboard.domain.models.task import Task
from src.taskboard.domain.repositories import StorageRepository


class InMemoryStorageRepository(StorageRepository):
    """Process-local task storage. Contents are lost on restart."""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}

    async def create_task(self, task: Task) -> str:
        if task.id is None:
            task.id = uuid4().hex
        self._tasks[task.id] = task.model_copy()
        return task.id

    async def get_task(self, task_id: str) -> Task:
        try:
            return self._tasks[task_id].model_copy()
        except KeyError:
            raise TaskNotFoundError(task_id) from None

    async def list_tasks(self) -> list[Task]:
        return [task.model_copy() for task in self._tasks.values()]

    async def update_task(self, task_id: str, changes: dict[str, Any]) -> Task:
        current = await self.get_task(task_id)
        updated = current.model_copy(update=changes)
        self._tasks[task_id] = updated
        return updated.model_copy()

    async def delete_task(self, task_id: str) -> None:
        if self._tasks.pop(task_id, None) is None:
            raise TaskNotFoundError(task_id)
