"""Task management endpoints."""

from typing import Annotated

from fastapi import APIRouter, Body, Response, status

from ..dependencies import AppTaskService
from ..schemas import ErrorResponse, TaskCreate, TaskResponse, TaskUpdate

router = APIRouter(prefix="/tasks", tags=["tasks"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
    404: {"model": ErrorResponse, "description": "Task not found"},
}


@router.get(
    "",
    response_model=list[TaskResponse],
    summary="List tasks",
)
async def list_tasks(service: AppTaskService) -> list[TaskResponse]:
    """List all tasks, newest first."""
    tasks = await service.list_tasks()
    return [TaskResponse.model_validate(task) for task in tasks]


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: ERROR_RESPONSES[400]},
    summary="Create task",
)
async def create_task(
    service: AppTaskService,
    request: Annotated[TaskCreate | None, Body()] = None,
) -> TaskResponse:
    """Create a new task.

    A missing body is treated as an empty object.

    Args:
        service: Task service
        request: Task creation request

    Returns:
        Created task (201 Created)
    """
    request = request or TaskCreate()
    task = await service.create_task(request.title, request.description)
    return TaskResponse.model_validate(task)


@router.patch(
    "/{task_id}",
    response_model=TaskResponse,
    responses=ERROR_RESPONSES,
    summary="Update task",
)
async def update_task(
    task_id: str,
    service: AppTaskService,
    request: Annotated[TaskUpdate | None, Body()] = None,
) -> TaskResponse:
    """Update any subset of title, description and done.

    The id is taken as sent; the service decides whether it is valid.

    Args:
        task_id: Task identifier
        service: Task service
        request: Fields to change

    Returns:
        Updated task
    """
    task = await service.update_task(task_id, request or TaskUpdate())
    return TaskResponse.model_validate(task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERROR_RESPONSES,
    summary="Delete task",
)
async def delete_task(task_id: str, service: AppTaskService) -> Response:
    await service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
