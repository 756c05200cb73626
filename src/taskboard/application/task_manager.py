from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

import httpx

from src.taskboard.domain.exceptions import TaskApiError
from src.taskboard.domain.models import Task, TaskCreate, TaskPriority, TaskType, TaskUpdate
from src.taskboard.infrastructure.http.task_api_client import TaskApiClient

logger = logging.getLogger(__name__)

StateListener = Callable[["TaskManager"], None]

DEFAULT_TASK_TYPE = TaskType.PERSONAL.value
DEFAULT_TASK_PRIORITY = TaskPriority.NORMAL.value

# TaskValidationError and malformed payloads both derive from ValueError.
_RECOVERABLE_ERRORS = (TaskApiError, httpx.HTTPError, ValueError)


class TaskManager:
    """
    Client-side state for a task list screen.

    Holds the loaded tasks, the "new task" form fields and the ``loading`` /
    ``error`` flags. Operations never raise for API failures; the message is
    stored in ``error`` instead. Listeners registered with ``subscribe`` are
    called after every state change.
    """

    def __init__(self, client: TaskApiClient | None = None) -> None:
        self._owns_client = client is None
        self._client = client or TaskApiClient()
        self._listeners: list[StateListener] = []

        self.tasks: list[Task] = []
        self.task_title = ""
        self.task_description = ""
        self.task_type = DEFAULT_TASK_TYPE
        self.task_priority = DEFAULT_TASK_PRIORITY
        self.loading = False
        self.error = ""

    async def __aenter__(self) -> TaskManager:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the API client if this manager created it."""
        if self._owns_client:
            await self._client.close()

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register ``listener`` and return a function that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    @contextmanager
    def _operation(self, action: str) -> Iterator[None]:
        self.loading = True
        self.error = ""
        self._notify()
        try:
            yield
        except _RECOVERABLE_ERRORS as exc:
            self.error = f"Error {action}: {exc}"
            logger.error("Error %s: %s", action, exc)
        finally:
            self.loading = False
            self._notify()

    def reset_form(self) -> None:
        self.task_title = ""
        self.task_description = ""
        self.task_priority = DEFAULT_TASK_PRIORITY
        self.task_type = DEFAULT_TASK_TYPE

    def find_task(self, task_id: str) -> Task | None:
        return next((task for task in self.tasks if task.id == task_id), None)

    async def load_tasks(self) -> None:
        with self._operation("loading tasks"):
            self.tasks = await self._client.get_all_tasks()

    async def create_task(self) -> None:
        with self._operation("creating task"):
            created = await self._client.create_task(
                TaskCreate(
                    title=self.task_title,
                    description=self.task_description,
                    priority=self.task_priority,
                    type=self.task_type,
                )
            )
            self.tasks.append(created)
            self.reset_form()

    async def delete_task(self, task_id: str) -> None:
        with self._operation("deleting task"):
            await self._client.delete_task(task_id)
            self.tasks = [task for task in self.tasks if task.id != task_id]

    async def update_task(self, task_id: str, updates: TaskUpdate | dict[str, Any]) -> None:
        with self._operation("updating task"):
            if not isinstance(updates, TaskUpdate):
                updates = TaskUpdate.model_validate(updates)
            updated = await self._client.update_task(task_id, updates)
            for index, task in enumerate(self.tasks):
                if task.id == task_id:
                    self.tasks[index] = updated
                    break

    async def toggle_task_completion(self, task_id: str) -> None:
        task = self.find_task(task_id)
        if task is None:
            return
        await self.update_task(task_id, TaskUpdate(completed=not task.completed))
