"""
TaskStatus ORM model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, CreatedAtMixin, UUIDMixin

if TYPE_CHECKING:
    from app.models.task import Task


class TaskStatus(Base, UUIDMixin, CreatedAtMixin):
    """A workflow state (e.g. Draft, To Review). Tasks refer to it by slug."""

    __tablename__ = "task_statuses"

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)

    tasks: Mapped[set[Task]] = relationship(
        "Task", back_populates="status", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<TaskStatus id={self.id} slug={self.slug!r}>"
