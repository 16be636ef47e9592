"""
Label ORM model and the task_labels association table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, CreatedAtMixin, UUIDMixin

if TYPE_CHECKING:
    from app.models.task import Task


task_labels = Table(
    "task_labels",
    Base.metadata,
    Column("task_id", ForeignKey("tasks.id", ondelete="CASCADE"), primary_key=True),
    Column("label_id", ForeignKey("labels.id", ondelete="RESTRICT"), primary_key=True, index=True),
)


class Label(Base, UUIDMixin, CreatedAtMixin):
    """A tag that can be attached to any number of tasks."""

    __tablename__ = "labels"

    name: Mapped[str] = mapped_column(String(1000), nullable=False, unique=True)

    tasks: Mapped[set[Task]] = relationship(
        "Task",
        secondary=task_labels,
        back_populates="labels",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Label id={self.id} name={self.name!r}>"
