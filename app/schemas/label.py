"""
Label schemas.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from app.schemas.patch import PatchRequest


class LabelCreateRequest(BaseModel):
    """Request body for POST /labels."""

    name: str = Field(min_length=3, max_length=1000)


class LabelUpdateRequest(PatchRequest):
    """Request body for PATCH/PUT /labels/{id}."""

    name: str | None = Field(default=None, min_length=3, max_length=1000)


class LabelResponse(BaseModel):
    id: UUID
    name: str
    created_at: datetime

    model_config = {"from_attributes": True}
