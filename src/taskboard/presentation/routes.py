from __future__ import annotations

from fastapi import APIRouter, HTTPException, Path, status

from src.taskboard.application.services import TaskService
from src.taskboard.domain.exceptions import TaskNotFoundError, TaskValidationError
from src.taskboard.domain.models import Task, TaskCreate, TaskUpdate

router = APIRouter(prefix="/tasks", tags=["tasks"])

# Instantiate services once (simple DI)
_task_service = TaskService()


@router.get(
    "",
    response_model=list[Task],
    summary="List tasks",
    description="Returns every task in creation order.",
)
async def list_tasks():
    return await _task_service.list_tasks()


@router.get(
    "/{task_id}",
    response_model=Task,
    summary="Get a task",
    responses={404: {"description": "Task not found."}},
)
async def get_task(task_id: str = Path(..., description="Task id")):
    try:
        return await _task_service.get_task(task_id)
    except TaskNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.post(
    "",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
    description=(
        "Creates a task after applying the rule for its type:\n"
        "- simple: title prefixed with 'Simple: '\n"
        "- complex: 'Complex: ' prefix, low priority raised to normal\n"
        "- personal: '[Personal] ' prefix\n"
        "- work: '[Work] ' prefix, low priority raised to normal\n"
        "- hobby: '[Hobby] ' prefix, priority forced to low\n"
    ),
    responses={
        400: {"description": "Invalid task data."},
        422: {"description": "Request body fields have the wrong JSON types."},
    },
)
async def create_task(body: TaskCreate):
    try:
        return await _task_service.create_task(body)
    except TaskValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.put(
    "/{task_id}",
    response_model=Task,
    summary="Update a task",
    responses={
        400: {"description": "Invalid task data."},
        404: {"description": "Task not found."},
        422: {"description": "Request body fields have the wrong JSON types."},
    },
)
async def update_task(body: TaskUpdate, task_id: str = Path(..., description="Task id")):
    try:
        return await _task_service.update_task(task_id, body)
    except TaskValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except TaskNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task",
    responses={404: {"description": "Task not found."}},
)
async def delete_task(task_id: str = Path(..., description="Task id")) -> None:
    try:
        await _task_service.delete_task(task_id)
    except TaskNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
