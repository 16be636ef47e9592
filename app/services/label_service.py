"""
Label business logic.
"""

from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError, ValidationFailedError
from app.models.label import Label
from app.repositories import LabelRepository, TaskRepository
from app.schemas.label import LabelCreateRequest, LabelUpdateRequest
from app.services.integrity import ReferenceGuard

logger = logging.getLogger(__name__)


class LabelService:
    """Handles all label operations."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.labels = LabelRepository(db)
        self.guard = ReferenceGuard(TaskRepository(db))

    async def list_labels(self) -> list[Label]:
        return await self.labels.list_all()

    async def get_label(self, label_id: UUID) -> Label:
        label = await self.labels.get(label_id)
        if label is None:
            raise NotFoundError("Label", label_id)
        return label

    async def create_label(self, data: LabelCreateRequest) -> Label:
        if await self.labels.exists_by_name(data.name):
            raise ConflictError(f"Label with name {data.name} already exists")
        label = Label(name=data.name)
        await self.labels.save(label)
        logger.info("Label created: label_id=%s name=%r", label.id, label.name)
        return label

    async def update_label(self, label_id: UUID, data: LabelUpdateRequest) -> Label:
        label = await self.get_label(label_id)
        if data.is_empty:
            return label

        name = data.patch("name")
        if name.is_null:
            raise ValidationFailedError("name", "must not be null")
        if name.is_set and name.value != label.name:
            if await self.labels.exists_by_name(name.value):
                raise ConflictError(f"Label with name {name.value} already exists")
            label.name = name.value

        await self.labels.save(label)
        return label

    async def delete_label(self, label_id: UUID) -> None:
        label = await self.get_label(label_id)
        await self.guard.ensure_label_unreferenced(label)
        await self.labels.delete(label)
        logger.info("Label deleted: label_id=%s", label_id)
