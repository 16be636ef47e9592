from __future__ import annotations

from uuid import UUID

from app.models.label import task_labels
from app.models.task import Task
from app.repositories.base import Repository


class TaskRepository(Repository[Task]):
    model = Task

    async def exists_by_assignee(self, user_id: UUID) -> bool:
        return await self._exists(Task.assignee_id == user_id)

    async def exists_by_status(self, status_id: UUID) -> bool:
        return await self._exists(Task.status_id == status_id)

    async def exists_by_label(self, label_id: UUID) -> bool:
        return await self._exists(task_labels.c.label_id == label_id)
