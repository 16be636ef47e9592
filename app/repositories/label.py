from __future__ import annotations

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import select

from app.models.label import Label
from app.repositories.base import Repository


class LabelRepository(Repository[Label]):
    model = Label

    async def exists_by_name(self, name: str) -> bool:
        return await self._exists(Label.name == name)

    async def get_by_name(self, name: str) -> Label | None:
        result = await self.db.execute(select(Label).where(Label.name == name))
        return result.scalar_one_or_none()

    async def get_many(self, label_ids: Iterable[UUID]) -> list[Label]:
        """Load every label whose id is in ``label_ids`` in a single query. Missing ids are skipped."""
        ids = list(label_ids)
        if not ids:
            return []
        result = await self.db.execute(select(Label).where(Label.id.in_(ids)))
        return list(result.scalars().all())
