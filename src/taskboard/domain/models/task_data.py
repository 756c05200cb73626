from pydantic import BaseModel, ConfigDict, Field

from src.taskboard.domain.models.task_priority import TaskPriority


class TaskData(BaseModel):
    """Immutable task value passed through the transformation rules."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="Task title.")
    description: str = Field(default="", description="Longer task description.")
    priority: TaskPriority = Field(
        default=TaskPriority.NORMAL, description="Task priority."
    )
    type: str = Field(description="Task type tag, e.g. 'work' or 'hobby'.")
