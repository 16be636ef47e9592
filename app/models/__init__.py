"""
SQLAlchemy ORM models.

All models imported here to ensure they are registered with Base.metadata.
Import order matters: base models before dependent models.
"""

from app.models.base import Base, CreatedAtMixin, TimestampMixin, UUIDMixin
from app.models.user import User, UserRole
from app.models.task_status import TaskStatus
from app.models.label import Label, task_labels
from app.models.task import Task

__all__ = [
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    "UUIDMixin",
    "User",
    "UserRole",
    "TaskStatus",
    "Label",
    "task_labels",
    "Task",
]
