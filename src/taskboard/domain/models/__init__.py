from src.taskboard.domain.models.payloads import TaskCreate, TaskUpdate
from src.taskboard.domain.models.task import Task
from src.taskboard.domain.models.task_data import TaskData
from src.taskboard.domain.models.task_priority import TaskPriority
from src.taskboard.domain.models.task_type import TaskType

__all__ = [
    "Task",
    "TaskData",
    "TaskPriority",
    "TaskType",
    "TaskCreate",
    "TaskUpdate",
]
