"""
Task ORM model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, CreatedAtMixin, UUIDMixin
from app.models.label import task_labels

if TYPE_CHECKING:
    from app.models.label import Label
    from app.models.task_status import TaskStatus
    from app.models.user import User


class Task(Base, UUIDMixin, CreatedAtMixin):
    """A unit of work with one status, an optional assignee and any number of labels."""

    __tablename__ = "tasks"

    index: Mapped[int | None] = mapped_column(Integer, nullable=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status_id: Mapped[UUID] = mapped_column(
        ForeignKey("task_statuses.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    assignee_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )

    # Relationships (owning side; back-references are derived)
    status: Mapped[TaskStatus] = relationship(
        "TaskStatus", back_populates="tasks", lazy="selectin"
    )
    assignee: Mapped[User | None] = relationship(
        "User", back_populates="assigned_tasks", lazy="selectin"
    )
    labels: Mapped[set[Label]] = relationship(
        "Label",
        secondary=task_labels,
        back_populates="tasks",
        lazy="selectin",
    )

    @property
    def label_ids(self) -> list[UUID]:
        return sorted((label.id for label in self.labels), key=str)

    def __repr__(self) -> str:
        return f"<Task id={self.id} name={self.name!r} status_id={self.status_id}>"
