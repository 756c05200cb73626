from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from src.taskboard.domain.models.task_data import TaskData
from src.taskboard.domain.models.task_priority import TaskPriority
from src.taskboard.domain.models.task_type import TaskType

PriorityAdjustment = Callable[[TaskPriority], TaskPriority]


def keep_priority(priority: TaskPriority) -> TaskPriority:
    return priority


def elevate_low_priority(priority: TaskPriority) -> TaskPriority:
    if priority == TaskPriority.LOW:
        return TaskPriority.NORMAL
    return priority


def force_low_priority(priority: TaskPriority) -> TaskPriority:
    return TaskPriority.LOW


@dataclass(frozen=True)
class TaskRule:
    """One transformation variant: a title prefix plus a priority adjustment."""

    kind: TaskType
    title_prefix: str
    adjust_priority: PriorityAdjustment = keep_priority

    def apply(self, task_data: TaskData) -> TaskData:
        """Return a transformed copy of ``task_data``; the argument is left as is."""
        return task_data.model_copy(
            update={
                "title": f"{self.title_prefix}{task_data.title}",
                "priority": self.adjust_priority(TaskPriority(task_data.priority)),
            }
        )


SIMPLE_RULE = TaskRule(TaskType.SIMPLE, "Simple: ")
COMPLEX_RULE = TaskRule(TaskType.COMPLEX, "Complex: ", elevate_low_priority)
PERSONAL_RULE = TaskRule(TaskType.PERSONAL, "[Personal] ")
WORK_RULE = TaskRule(TaskType.WORK, "[Work] ", elevate_low_priority)
# Hobbies never outrank other work.
HOBBY_RULE = TaskRule(TaskType.HOBBY, "[Hobby] ", force_low_priority)

ALL_RULES: tuple[TaskRule, ...] = (
    SIMPLE_RULE,
    COMPLEX_RULE,
    PERSONAL_RULE,
    WORK_RULE,
    HOBBY_RULE,
)
