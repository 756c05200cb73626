from pydantic import BaseModel, Field


class TaskCreate(BaseModel):
    """Body of a create request. Values are checked by the task validators."""

    title: str | None = Field(default=None, description="Task title.")
    description: str | None = Field(default=None, description="Longer description.")
    priority: str | None = Field(
        default=None, description="One of low, normal, high, urgent."
    )
    type: str | None = Field(
        default=None, description="One of simple, complex, personal, work, hobby."
    )


class TaskUpdate(BaseModel):
    """Partial update; unset fields are left untouched."""

    title: str | None = None
    description: str | None = None
    priority: str | None = None
    completed: bool | None = None
