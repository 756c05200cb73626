class TaskNotFoundError(Exception):
    """Raised when a task identifier does not exist in the task storage."""
    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task with id '{task_id}' was not found.")
        self.task_id = task_id


class TaskValidationError(ValueError):
    """Raised when task fields fail validation."""


class TaskApiError(Exception):
    """Raised by the API client when the server answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
