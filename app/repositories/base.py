"""
Generic async repository over one mapped class.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, exists, func, select, true
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ValidationFailedError
from app.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


def page_offset(page: int, page_size: int) -> int:
    """Translate a 1-based page number into a 0-based row offset."""
    errors: dict[str, str] = {}
    if page < 1:
        errors["page"] = "must be greater than or equal to 1"
    if page_size < 1:
        errors["page_size"] = "must be greater than or equal to 1"
    if errors:
        raise ValidationFailedError(errors=errors)
    return (page - 1) * page_size


class Repository(Generic[ModelT]):
    """CRUD plus predicate-based paging for a single model."""

    model: ClassVar[type[Base]]

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def ordering(self) -> Sequence[Any]:
        return (self.model.created_at, self.model.id)  # type: ignore[attr-defined]

    async def get(self, entity_id: UUID) -> ModelT | None:
        return await self.db.get(self.model, entity_id)  # type: ignore[return-value]

    async def save(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        await self.db.flush()
        return entity

    async def delete(self, entity: ModelT) -> None:
        await self.db.delete(entity)
        await self.db.flush()

    async def find_matching(
        self,
        predicate: ColumnElement[bool] | None = None,
        page: int = 1,
        page_size: int = 10,
    ) -> tuple[list[ModelT], int]:
        """
        Return one page of rows matching ``predicate`` and the total match count.

        The count ignores paging so callers can report it alongside the slice.
        """
        offset = page_offset(page, page_size)
        stmt = select(self.model).where(predicate if predicate is not None else true())

        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = (await self.db.execute(count_stmt)).scalar_one()

        stmt = stmt.order_by(*self.ordering()).offset(offset).limit(page_size)
        result = await self.db.execute(stmt)
        return list(result.scalars().all()), total

    async def list_all(self) -> list[ModelT]:
        result = await self.db.execute(select(self.model).order_by(*self.ordering()))
        return list(result.scalars().all())

    async def _exists(self, *criteria: ColumnElement[bool]) -> bool:
        return bool(await self.db.scalar(select(exists().where(*criteria))))
