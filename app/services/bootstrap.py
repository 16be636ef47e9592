"""
Startup data: the admin account, default task statuses and labels.

Safe to run on every start; existing rows are left alone.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.security import hash_password
from app.models.label import Label
from app.models.task_status import TaskStatus
from app.models.user import User, UserRole
from app.repositories import LabelRepository, TaskStatusRepository, UserRepository

logger = logging.getLogger(__name__)

DEFAULT_STATUSES: tuple[tuple[str, str], ...] = (
    ("Draft", "draft"),
    ("To Review", "to_review"),
    ("To Be Fixed", "to_be_fixed"),
    ("To Publish", "to_publish"),
    ("Published", "published"),
)

DEFAULT_LABELS: tuple[str, ...] = ("feature", "bug")


async def seed_defaults(db: AsyncSession) -> None:
    users = UserRepository(db)
    statuses = TaskStatusRepository(db)
    labels = LabelRepository(db)

    admin_email = settings.ADMIN_EMAIL.lower()
    if not await users.exists_by_email(admin_email):
        await users.save(
            User(
                email=admin_email,
                password_digest=hash_password(settings.ADMIN_PASSWORD),
                role=UserRole.ADMIN,
            )
        )
        logger.info("Created admin user %s", admin_email)

    for name, slug in DEFAULT_STATUSES:
        if not await statuses.exists_by_slug(slug) and not await statuses.exists_by_name(name):
            await statuses.save(TaskStatus(name=name, slug=slug))

    for name in DEFAULT_LABELS:
        if not await labels.exists_by_name(name):
            await labels.save(Label(name=name))
