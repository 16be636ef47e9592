from __future__ import annotations

from sqlalchemy import select

from app.models.task_status import TaskStatus
from app.repositories.base import Repository


class TaskStatusRepository(Repository[TaskStatus]):
    model = TaskStatus

    async def exists_by_name(self, name: str) -> bool:
        return await self._exists(TaskStatus.name == name)

    async def exists_by_slug(self, slug: str) -> bool:
        return await self._exists(TaskStatus.slug == slug)

    async def get_by_slug(self, slug: str) -> TaskStatus | None:
        result = await self.db.execute(select(TaskStatus).where(TaskStatus.slug == slug))
        return result.scalar_one_or_none()
