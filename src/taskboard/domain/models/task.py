from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.taskboard.domain.models.task_priority import TaskPriority


class Task(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(default=None, description="Unique task identifier.")
    title: str = Field(description="Task title, as produced by the type rule.")
    description: str = Field(default="", description="Longer task description.")
    priority: TaskPriority = Field(description="Task priority.")
    type: str = Field(description="Normalised task type tag.")
    completed: bool = Field(default=False, description="Whether the task is done.")
    created_at: datetime = Field(
        alias="createdAt", description="When the task was created."
    )
