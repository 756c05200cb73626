from __future__ import annotations

import importlib
from collections.abc import Callable
from datetime import UTC, datetime

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.taskboard.domain.models import Task, TaskData, TaskPriority
from src.taskboard.domain.repositories import StorageRepository
from src.taskboard.infrastructure.memory.repository import InMemoryStorageRepository


def _make_task(task_id: str = "task-1", **overrides) -> Task:
    """Build a stored-task record with sensible defaults."""
    fields = {
        "id": task_id,
        "title": "[Work] Write report",
        "description": "Quarterly numbers",
        "priority": TaskPriority.NORMAL,
        "type": "work",
        "completed": False,
        "created_at": datetime(2024, 1, 1, tzinfo=UTC),
    }
    fields.update(overrides)
    return Task(**fields)


def _task_json(task_id: str = "task-1", **overrides) -> dict:
    """Wire representation of ``_make_task``."""
    return _make_task(task_id, **overrides).model_dump(mode="json", by_alias=True)


@pytest.fixture
def task_data() -> TaskData:
    return TaskData(
        title="Test Task",
        description="Test description",
        priority=TaskPriority.NORMAL,
        type="test",
    )


@pytest.fixture
def env_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Provide environment variables for ApiSettings."""
    monkeypatch.setenv("APP_NAME", "Test API")
    monkeypatch.setenv("APP_VERSION", "0.1.0")
    monkeypatch.setenv("STORAGE_BACKEND", "memory")


def _patch_inject_instance(
    monkeypatch: pytest.MonkeyPatch,
    storage: StorageRepository,
) -> Callable[[object], object]:
    """Patch `inject.instance` to always return the given repository."""
    import inject

    def fake_instance(interface: object) -> object:
        if interface is StorageRepository:
            return storage
        raise RuntimeError(f"Unexpected dependency request: {interface}")

    monkeypatch.setattr(inject, "instance", fake_instance)
    return fake_instance


@pytest.fixture
def storage() -> InMemoryStorageRepository:
    return InMemoryStorageRepository()


@pytest.fixture
def stubbed_services(env_settings: None, monkeypatch: pytest.MonkeyPatch, storage):
    """Reload service module with the in-memory repository injected."""
    _patch_inject_instance(monkeypatch, storage)

    services_module = importlib.reload(
        importlib.import_module("src.taskboard.application.services")
    )
    return services_module, storage


@pytest.fixture
def api_client(env_settings: None, monkeypatch: pytest.MonkeyPatch, storage):
    """FastAPI test client with routes wired to the in-memory repository."""
    _patch_inject_instance(monkeypatch, storage)

    # Reload modules so module-level singletons pick up the patched injector.
    importlib.reload(importlib.import_module("src.taskboard.application.services"))
    routes_module = importlib.reload(
        importlib.import_module("src.taskboard.presentation.routes")
    )

    app = FastAPI()
    app.include_router(routes_module.router, prefix="/api")
    client = TestClient(app)
    return client, storage


@pytest.fixture
def make_task() -> Callable[..., Task]:
    return _make_task


@pytest.fixture
def task_json() -> Callable[..., dict]:
    return _task_json
