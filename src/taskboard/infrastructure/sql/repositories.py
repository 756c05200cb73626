from __future__ import annotations

from typing import Any
from uuid import uuid4

from sqlalchemy import select

from src.taskboard.domain.exceptions import TaskNotFoundError
from src.taskboard.domain.models.task import Task
from src.taskboard.domain.repositories import StorageRepository
from src.taskboard.infrastructure.sql.mappers import OrmMapper
from src.taskboard.infrastructure.sql.orm import SqlOrm, TaskRow

_UPDATABLE_FIELDS = ("title", "description", "priority", "completed")


class SqlStorageRepository(StorageRepository):
    """SQL-backed task storage using SQLAlchemy async sessions."""

    def __init__(self, orm: SqlOrm) -> None:
        self._orm = orm

    async def create_task(self, task: Task) -> str:
        """Persist a new task and return its id."""
        if task.id is None:
            task.id = uuid4().hex

        async with self._orm.session_factory() as session:
            async with session.begin():
                session.add(OrmMapper.to_task_row(task))
        return task.id

    async def get_task(self, task_id: str) -> Task:
        async with self._orm.session_factory() as session:
            task_row = await session.get(TaskRow, task_id)
        if task_row is None:
            raise TaskNotFoundError(task_id)
        return OrmMapper.to_domain_task(task_row)

    async def list_tasks(self) -> list[Task]:
        statement = select(TaskRow).order_by(TaskRow.created_at, TaskRow.id)
        async with self._orm.session_factory() as session:
            result = await session.execute(statement)
            rows = result.scalars().all()
        return [OrmMapper.to_domain_task(row) for row in rows]

    async def update_task(self, task_id: str, changes: dict[str, Any]) -> Task:
        """Apply the updatable fields of ``changes``; other keys are ignored."""
        async with self._orm.session_factory() as session:
            async with session.begin():
                task_row = await session.get(TaskRow, task_id)
                if task_row is None:
                    raise TaskNotFoundError(task_id)
                for field in _UPDATABLE_FIELDS:
                    if field in changes:
                        setattr(task_row, field, changes[field])
            return OrmMapper.to_domain_task(task_row)

    async def delete_task(self, task_id: str) -> None:
        async with self._orm.session_factory() as session:
            async with session.begin():
                task_row = await session.get(TaskRow, task_id)
                if task_row is None:
                    raise TaskNotFoundError(task_id)
                await session.delete(task_row)
