"""
Relationship consistency.

Task owns its relations (status_id, assignee_id, task_labels rows); the
collections on User, TaskStatus and Label are derived back-references.
Every relation change goes through the helpers below so both sides agree
in memory before anything is flushed, and deletes of referenced rows are
refused before they reach the database.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy import inspect

from app.core.exceptions import ConflictError
from app.models.label import Label
from app.models.task import Task
from app.models.task_status import TaskStatus
from app.models.user import User
from app.repositories.task import TaskRepository

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Relation mutation
# ---------------------------------------------------------------------------

def set_status(task: Task, status: TaskStatus) -> None:
    if task.status is not status:
        task.status = status
        task.status_id = status.id


def assign(task: Task, user: User | None) -> None:
    """Point ``task`` at ``user`` (or nobody); the old assignee loses the back-reference."""
    if task.assignee is user:
        return
    task.assignee = user
    task.assignee_id = user.id if user is not None else None


def link_label(task: Task, label: Label) -> None:
    task.labels.add(label)


def unlink_label(task: Task, label: Label) -> None:
    task.labels.discard(label)


def replace_labels(task: Task, labels: Iterable[Label]) -> None:
    """
    Make ``task.labels`` exactly ``labels``.

    Callers resolve every label before calling, so this never fails halfway.
    """
    wanted = set(labels)
    for label in list(task.labels - wanted):
        unlink_label(task, label)
    for label in wanted - task.labels:
        link_label(task, label)


def detach(task: Task) -> None:
    """Drop every back-reference to ``task`` ahead of deleting it."""
    assign(task, None)
    replace_labels(task, ())
    status = task.status
    if status is not None and "tasks" not in inspect(status).unloaded:
        # removing through the collection would null the required FK; reload instead
        inspect(status).session.expire(status, ["tasks"])


# ---------------------------------------------------------------------------
# Delete guards
# ---------------------------------------------------------------------------

class ReferenceGuard:
    """Refuses deletes of users, statuses and labels that a task still references."""

    def __init__(self, tasks: TaskRepository) -> None:
        self.tasks = tasks

    async def ensure_user_unreferenced(self, user: User) -> None:
        if await self.tasks.exists_by_assignee(user.id):
            logger.warning("Refused to delete user_id=%s: tasks assigned", user.id)
            raise ConflictError("Cannot delete user with assigned tasks")

    async def ensure_status_unreferenced(self, status: TaskStatus) -> None:
        if await self.tasks.exists_by_status(status.id):
            logger.warning("Refused to delete task status slug=%s: tasks use it", status.slug)
            raise ConflictError("Cannot delete task status with associated tasks")

    async def ensure_label_unreferenced(self, label: Label) -> None:
        if await self.tasks.exists_by_label(label.id):
            logger.warning("Refused to delete label_id=%s: attached to tasks", label.id)
            raise ConflictError("Cannot delete label with associated tasks")
