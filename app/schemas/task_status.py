"""
Task status schemas.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from app.schemas.patch import PatchRequest


class TaskStatusCreateRequest(BaseModel):
    """Request body for POST /task_statuses."""

    name: str = Field(min_length=1, max_length=255)
    slug: str = Field(min_length=1, max_length=255)


class TaskStatusUpdateRequest(PatchRequest):
    """Request body for PATCH/PUT /task_statuses/{id}."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    slug: str | None = Field(default=None, min_length=1, max_length=255)


class TaskStatusResponse(BaseModel):
    id: UUID
    name: str
    slug: str
    created_at: datetime

    model_config = {"from_attributes": True}
