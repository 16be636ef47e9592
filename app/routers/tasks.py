"""
Task management endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.dependencies import get_current_user
from app.models.user import User
from app.schemas.task import TaskCreateRequest, TaskFilter, TaskResponse, TaskUpdateRequest
from app.services.task_service import TaskService

router = APIRouter()


def get_task_service(db: AsyncSession = Depends(get_db)) -> TaskService:
    return TaskService(db=db)


# ---------------------------------------------------------------------------
# List Tasks
# ---------------------------------------------------------------------------

@router.get("/tasks", response_model=list[TaskResponse], summary="List tasks")
async def list_tasks(
    response: Response,
    title_cont: str | None = Query(default=None, max_length=200),
    assignee_id: UUID | None = Query(default=None),
    status_slug: str | None = Query(default=None, alias="status"),
    label_id: UUID | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    _: User = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
) -> list[TaskResponse]:
    """Ten tasks per page; the total match count is in X-Total-Count."""
    params = TaskFilter(
        title_cont=title_cont,
        assignee_id=assignee_id,
        status=status_slug,
        label_id=label_id,
        page=page,
    )
    tasks, total = await service.list_tasks(params)
    response.headers["X-Total-Count"] = str(total)
    return [TaskResponse.from_task(t) for t in tasks]


@router.get("/tasks/{task_id}", response_model=TaskResponse, summary="Get task detail")
async def get_task(
    task_id: UUID,
    _: User = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    return TaskResponse.from_task(await service.get_task(task_id))


@router.post(
    "/tasks",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
)
async def create_task(
    data: TaskCreateRequest,
    _: User = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    return TaskResponse.from_task(await service.create_task(data))


@router.api_route(
    "/tasks/{task_id}",
    methods=["PATCH", "PUT"],
    response_model=TaskResponse,
    summary="Update a task",
)
async def update_task(
    task_id: UUID,
    data: TaskUpdateRequest,
    _: User = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    return TaskResponse.from_task(await service.update_task(task_id, data))


@router.delete(
    "/tasks/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task",
)
async def delete_task(
    task_id: UUID,
    _: User = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
) -> None:
    await service.delete_task(task_id)
