"""
Task status endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.dependencies import get_current_user
from app.models.user import User
from app.schemas.task_status import (
    TaskStatusCreateRequest,
    TaskStatusResponse,
    TaskStatusUpdateRequest,
)
from app.services.task_status_service import TaskStatusService

router = APIRouter()


def get_task_status_service(db: AsyncSession = Depends(get_db)) -> TaskStatusService:
    return TaskStatusService(db=db)


@router.get("/task_statuses", response_model=list[TaskStatusResponse], summary="List task statuses")
async def list_statuses(
    response: Response,
    _: User = Depends(get_current_user),
    service: TaskStatusService = Depends(get_task_status_service),
) -> list[TaskStatusResponse]:
    statuses = await service.list_statuses()
    response.headers["X-Total-Count"] = str(len(statuses))
    return [TaskStatusResponse.model_validate(s) for s in statuses]


@router.get("/task_statuses/{status_id}", response_model=TaskStatusResponse, summary="Get task status")
async def get_status(
    status_id: UUID,
    _: User = Depends(get_current_user),
    service: TaskStatusService = Depends(get_task_status_service),
) -> TaskStatusResponse:
    return TaskStatusResponse.model_validate(await service.get_status(status_id))


@router.post(
    "/task_statuses",
    response_model=TaskStatusResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task status",
)
async def create_status(
    data: TaskStatusCreateRequest,
    _: User = Depends(get_current_user),
    service: TaskStatusService = Depends(get_task_status_service),
) -> TaskStatusResponse:
    return TaskStatusResponse.model_validate(await service.create_status(data))


@router.api_route(
    "/task_statuses/{status_id}",
    methods=["PATCH", "PUT"],
    response_model=TaskStatusResponse,
    summary="Update a task status",
)
async def update_status(
    status_id: UUID,
    data: TaskStatusUpdateRequest,
    _: User = Depends(get_current_user),
    service: TaskStatusService = Depends(get_task_status_service),
) -> TaskStatusResponse:
    return TaskStatusResponse.model_validate(await service.update_status(status_id, data))


@router.delete(
    "/task_statuses/{status_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task status",
)
async def delete_status(
    status_id: UUID,
    _: User = Depends(get_current_user),
    service: TaskStatusService = Depends(get_task_status_service),
) -> None:
    """Refused with 409 while any task is in this status."""
    await service.delete_status(status_id)
