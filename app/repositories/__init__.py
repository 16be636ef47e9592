"""
Repositories: the only place that talks to the session about a single entity type.
"""

from app.repositories.base import Repository
from app.repositories.label import LabelRepository
from app.repositories.task import TaskRepository
from app.repositories.task_status import TaskStatusRepository
from app.repositories.user import UserRepository

__all__ = [
    "Repository",
    "LabelRepository",
    "TaskRepository",
    "TaskStatusRepository",
    "UserRepository",
]
