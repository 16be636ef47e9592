"""
Task business logic.

Handles task CRUD and the task's relations (status, assignee, labels).
Updates follow tri-state patch rules: every field is validated and every
reference resolved before the task is touched, so a failed update leaves it
exactly as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import NotFoundError, ValidationFailedError
from app.models.label import Label
from app.models.task import Task
from app.models.task_status import TaskStatus
from app.models.user import User
from app.repositories import LabelRepository, TaskRepository, TaskStatusRepository, UserRepository
from app.schemas.task import TaskCreateRequest, TaskFilter, TaskUpdateRequest
from app.services.filters import build_task_predicate
from app.services.integrity import assign, detach, replace_labels, set_status

logger = logging.getLogger(__name__)

# Wire fields that cannot be cleared with an explicit null
REQUIRED_TASK_FIELDS = ("title", "status")


class TaskService:
    """Handles all task operations."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.tasks = TaskRepository(db)
        self.statuses = TaskStatusRepository(db)
        self.users = UserRepository(db)
        self.labels = LabelRepository(db)

    # -----------------------------------------------------------------------
    # List Tasks
    # -----------------------------------------------------------------------

    async def list_tasks(
        self,
        params: TaskFilter | None = None,
        page_size: int | None = None,
    ) -> tuple[list[Task], int]:
        """Return one page of tasks matching ``params`` and the total match count."""
        params = params or TaskFilter()
        return await self.tasks.find_matching(
            build_task_predicate(params),
            page=params.page,
            page_size=page_size or settings.DEFAULT_PAGE_SIZE,
        )

    # -----------------------------------------------------------------------
    # Get Task
    # -----------------------------------------------------------------------

    async def get_task(self, task_id: UUID) -> Task:
        task = await self.tasks.get(task_id)
        if task is None:
            raise NotFoundError("Task", task_id)
        return task

    # -----------------------------------------------------------------------
    # Create Task
    # -----------------------------------------------------------------------

    async def create_task(self, data: TaskCreateRequest) -> Task:
        """
        Create a task.

        The status slug must resolve; assignee and labels are optional but
        must exist when given.
        """
        status = await self._resolve_status(data.status)
        assignee = await self._resolve_user(data.assignee_id) if data.assignee_id else None
        labels = await self._resolve_labels(data.label_ids)

        # set every relation here; one left unset is unloaded after the flush
        task = Task(
            index=data.index,
            name=data.title,
            description=data.content,
            status=status,
            assignee=assignee,
            labels=set(labels),
        )

        await self.tasks.save(task)
        logger.info("Task created: task_id=%s status=%s", task.id, status.slug)
        return task

    # -----------------------------------------------------------------------
    # Update Task
    # -----------------------------------------------------------------------

    async def update_task(self, task_id: UUID, data: TaskUpdateRequest) -> Task:
        """
        Partially update a task.

        Absent fields are left alone, explicit nulls clear optional fields
        (content, index, assignee; labels become empty) and are rejected for
        title and status. label_ids replaces the whole label set.
        """
        task = await self.get_task(task_id)
        if data.is_empty:
            return task

        cleared = data.cleared(REQUIRED_TASK_FIELDS)
        if cleared:
            raise ValidationFailedError(errors={name: "must not be null" for name in cleared})

        index = data.patch("index")
        title = data.patch("title")
        content = data.patch("content")
        status_patch = data.patch("status")
        assignee_patch = data.patch("assignee_id")
        labels_patch = data.patch("label_ids")

        await self._load_relations(task)

        # Resolve everything first; nothing below this block can fail
        status = await self._resolve_status(status_patch.value) if status_patch.is_set else None
        assignee = (
            await self._resolve_user(assignee_patch.value) if assignee_patch.is_set else None
        )
        labels = (
            await self._resolve_labels(labels_patch.value or [])
            if labels_patch.is_explicit
            else None
        )

        if index.is_explicit:
            task.index = index.value
        if title.is_set:
            task.name = title.value
        if content.is_explicit:
            task.description = content.value
        if status is not None:
            set_status(task, status)
        if assignee_patch.is_explicit:
            previous = task.assignee
            assign(task, assignee)
            if previous is not assignee:
                logger.info(
                    "Task %s reassigned: %s -> %s",
                    task.id,
                    previous.id if previous else None,
                    assignee.id if assignee else None,
                )
        if labels is not None:
            replace_labels(task, labels)

        await self.tasks.save(task)
        return task

    # -----------------------------------------------------------------------
    # Delete Task
    # -----------------------------------------------------------------------

    async def delete_task(self, task_id: UUID) -> None:
        task = await self.get_task(task_id)
        await self._load_relations(task)
        detach(task)
        await self.tasks.delete(task)
        logger.info("Task deleted: task_id=%s", task_id)

    # -----------------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------------

    async def _load_relations(self, task: Task) -> None:
        """Relations of a task created earlier in the session may still be unloaded."""
        await task.awaitable_attrs.status
        await task.awaitable_attrs.assignee
        await task.awaitable_attrs.labels

    async def _resolve_status(self, slug: str) -> TaskStatus:
        status = await self.statuses.get_by_slug(slug)
        if status is None:
            raise NotFoundError("TaskStatus", slug)
        return status

    async def _resolve_user(self, user_id: UUID) -> User:
        user = await self.users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def _resolve_labels(self, label_ids: Iterable[UUID]) -> list[Label]:
        """Load all requested labels or fail naming every id that does not exist."""
        wanted = list(dict.fromkeys(label_ids))
        labels = await self.labels.get_many(wanted)
        found = {label.id for label in labels}
        missing = [label_id for label_id in wanted if label_id not in found]
        if missing:
            raise NotFoundError("Label", ", ".join(str(m) for m in missing))
        return labels
