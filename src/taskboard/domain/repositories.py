from __future__ import annotations

from typing import Any, Protocol

from src.taskboard.domain.models.task import Task


class StorageRepository(Protocol):
    """Repository contract for persisting tasks. Unknown ids raise ``TaskNotFoundError``."""

    async def create_task(self, task: Task) -> str:
        """Persist a new task, assigning an id when missing, and return the id."""

    async def get_task(self, task_id: str) -> Task:
        """Fetch a single task."""

    async def list_tasks(self) -> list[Task]:
        """Return every task in creation order."""

    async def update_task(self, task_id: str, changes: dict[str, Any]) -> Task:
        """Apply ``changes`` to the stored task and return the updated copy."""

    async def delete_task(self, task_id: str) -> None:
        """Remove a task."""
