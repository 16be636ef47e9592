"""
Task status business logic.

Statuses are referenced by slug from tasks and filters, so both name and
slug are unique and neither can be cleared.
"""

from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError, ValidationFailedError
from app.models.task_status import TaskStatus
from app.repositories import TaskRepository, TaskStatusRepository
from app.schemas.task_status import TaskStatusCreateRequest, TaskStatusUpdateRequest
from app.services.integrity import ReferenceGuard

logger = logging.getLogger(__name__)


class TaskStatusService:
    """Handles all task status operations."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.statuses = TaskStatusRepository(db)
        self.guard = ReferenceGuard(TaskRepository(db))

    async def list_statuses(self) -> list[TaskStatus]:
        return await self.statuses.list_all()

    async def get_status(self, status_id: UUID) -> TaskStatus:
        status = await self.statuses.get(status_id)
        if status is None:
            raise NotFoundError("TaskStatus", status_id)
        return status

    async def create_status(self, data: TaskStatusCreateRequest) -> TaskStatus:
        if await self.statuses.exists_by_name(data.name):
            raise ConflictError(f"Task status with name {data.name} already exists")
        if await self.statuses.exists_by_slug(data.slug):
            raise ConflictError(f"Task status with slug {data.slug} already exists")

        status = TaskStatus(name=data.name, slug=data.slug)
        await self.statuses.save(status)
        logger.info("Task status created: slug=%s", status.slug)
        return status

    async def update_status(self, status_id: UUID, data: TaskStatusUpdateRequest) -> TaskStatus:
        status = await self.get_status(status_id)
        if data.is_empty:
            return status

        cleared = data.cleared(("name", "slug"))
        if cleared:
            raise ValidationFailedError(errors={name: "must not be null" for name in cleared})

        name = data.patch("name")
        slug = data.patch("slug")
        if name.is_set and name.value != status.name:
            if await self.statuses.exists_by_name(name.value):
                raise ConflictError(f"Task status with name {name.value} already exists")
        if slug.is_set and slug.value != status.slug:
            if await self.statuses.exists_by_slug(slug.value):
                raise ConflictError(f"Task status with slug {slug.value} already exists")

        if name.is_set:
            status.name = name.value
        if slug.is_set:
            status.slug = slug.value

        await self.statuses.save(status)
        return status

    async def delete_status(self, status_id: UUID) -> None:
        status = await self.get_status(status_id)
        await self.guard.ensure_status_unreferenced(status)
        await self.statuses.delete(status)
        logger.info("Task status deleted: slug=%s", status.slug)
