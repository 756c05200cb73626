from __future__ import annotations

from datetime import UTC, datetime

from src.taskboard.domain.models.task import Task
from src.taskboard.infrastructure.sql.orm import TaskRow


def _to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC)


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset; rows are written by _to_utc so a naive value is UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class OrmMapper:
    @staticmethod
    def to_task_row(task: Task) -> TaskRow:
        if task.id is None:
            raise ValueError("Task id is required to persist TaskRow.")
        return TaskRow(
            id=task.id,
            title=task.title,
            description=task.description,
            priority=task.priority,
            type=task.type,
            completed=task.completed,
            created_at=_to_utc(task.created_at),
        )

    @staticmethod
    def to_domain_task(row: TaskRow) -> Task:
        return Task(
            id=row.id,
            title=row.title,
            description=row.description,
            priority=row.priority,
            type=row.type,
            completed=row.completed,
            created_at=_as_utc(row.created_at),
        )
