"""
Task schemas.

Request/response models for task CRUD and the task list filter.
The wire names (title, content, status) differ from the model attributes
(name, description, status.slug); mapping happens in TaskResponse.from_task.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from app.models.task import Task
from app.schemas.patch import PatchRequest


def _not_blank(v: str | None) -> str | None:
    if v is not None and not v.strip():
        raise ValueError("must not be blank")
    return v


# ---------------------------------------------------------------------------
# Task Create
# ---------------------------------------------------------------------------

class TaskCreateRequest(BaseModel):
    """Request body for POST /tasks."""

    index: int | None = None
    title: str = Field(min_length=1, max_length=255)
    content: str | None = None
    status: str = Field(min_length=1, description="Slug of an existing task status")
    assignee_id: UUID | None = None
    label_ids: list[UUID] = Field(default_factory=list)

    @field_validator("title", "status")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _not_blank(v)


# ---------------------------------------------------------------------------
# Task Update
# ---------------------------------------------------------------------------

class TaskUpdateRequest(PatchRequest):
    """
    Request body for PATCH/PUT /tasks/{task_id}.

    label_ids replaces the whole label set when present.
    """

    index: int | None = None
    title: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = None
    status: str | None = Field(default=None, min_length=1)
    assignee_id: UUID | None = None
    label_ids: list[UUID] | None = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str | None) -> str | None:
        return _not_blank(v)


# ---------------------------------------------------------------------------
# List filter
# ---------------------------------------------------------------------------

class TaskFilter(BaseModel):
    """Optional filters for GET /tasks. Every field set narrows the result (AND)."""

    title_cont: str | None = None
    assignee_id: UUID | None = None
    status: str | None = None
    label_id: UUID | None = None
    page: int = Field(default=1, ge=1)


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------

class TaskResponse(BaseModel):
    id: UUID
    index: int | None
    title: str
    content: str | None
    status: str
    assignee_id: UUID | None
    label_ids: list[UUID] = Field(default_factory=list)
    created_at: datetime

    @classmethod
    def from_task(cls, task: Task) -> TaskResponse:
        return cls(
            id=task.id,
            index=task.index,
            title=task.name,
            content=task.description,
            status=task.status.slug,
            assignee_id=task.assignee.id if task.assignee is not None else None,
            label_ids=task.label_ids,
            created_at=task.created_at,
        )
