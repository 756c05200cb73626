"""Async HTTP client for the task REST API.

Requests are validated locally before they are sent. Non-2xx answers raise
``TaskApiError``; transport failures surface as ``httpx`` exceptions.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from src.setup.client_config import ClientSettings, get_client_settings
from src.taskboard.domain.exceptions import TaskApiError, TaskValidationError
from src.taskboard.domain.models import Task, TaskCreate, TaskData, TaskUpdate
from src.taskboard.domain.validation import validate_new_task, validate_task_fields

logger = logging.getLogger(__name__)


def _require_id(task_id: str) -> None:
    if not task_id:
        raise TaskValidationError("Task ID is required")


def _raise_for_status(response: httpx.Response, action: str) -> None:
    if response.is_success:
        return
    raise TaskApiError(
        f"Failed to {action}: {response.status_code} {response.reason_phrase}",
        status_code=response.status_code,
    )


class TaskApiClient:
    """Thin wrapper over ``httpx.AsyncClient`` speaking the ``/tasks`` endpoints."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        settings: ClientSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if settings is None:
            settings = get_client_settings()
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self._client = httpx.AsyncClient(
            timeout=settings.REQUEST_TIMEOUT_SECONDS,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> TaskApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    def _url(self, task_id: str | None = None) -> str:
        if task_id is None:
            return f"{self.base_url}/tasks"
        return f"{self.base_url}/tasks/{task_id}"

    async def get_all_tasks(self) -> list[Task]:
        response = await self._client.get(self._url())
        _raise_for_status(response, "fetch tasks")
        return [Task.model_validate(item) for item in response.json()]

    async def get_task_by_id(self, task_id: str) -> Task:
        _require_id(task_id)
        response = await self._client.get(self._url(task_id))
        _raise_for_status(response, "fetch task")
        return Task.model_validate(response.json())

    async def create_task(self, task: TaskCreate | TaskData) -> Task:
        body: dict[str, Any] = task.model_dump(mode="json", exclude_none=True)
        validate_new_task(body.get("title"), body.get("type"), body.get("priority"))

        response = await self._client.post(self._url(), json=body)
        _raise_for_status(response, "create task")
        created = Task.model_validate(response.json())
        logger.debug("Task created remotely", extra={"task_id": created.id})
        return created

    async def update_task(self, task_id: str, updates: TaskUpdate) -> Task:
        _require_id(task_id)
        validate_task_fields(title=updates.title, priority=updates.priority)

        body = updates.model_dump(mode="json", exclude_unset=True, exclude_none=True)
        response = await self._client.put(self._url(task_id), json=body)
        _raise_for_status(response, "update task")
        return Task.model_validate(response.json())

    async def delete_task(self, task_id: str) -> None:
        _require_id(task_id)
        response = await self._client.delete(self._url(task_id))
        _raise_for_status(response, "delete task")
