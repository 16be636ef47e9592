"""
Startup seed data.
"""

from app.core.config import settings
from app.core.security import verify_password
from app.models import UserRole
from app.repositories import LabelRepository, TaskStatusRepository, UserRepository
from app.services.bootstrap import DEFAULT_LABELS, DEFAULT_STATUSES, seed_defaults


async def test_seed_creates_admin_statuses_and_labels(db):
    await seed_defaults(db)

    admin = await UserRepository(db).get_by_email(settings.ADMIN_EMAIL.lower())
    assert admin is not None
    assert admin.role == UserRole.ADMIN
    assert verify_password(settings.ADMIN_PASSWORD, admin.password_digest)
    statuses = await TaskStatusRepository(db).list_all()
    assert {s.slug for s in statuses} == {slug for _, slug in DEFAULT_STATUSES}
    labels = await LabelRepository(db).list_all()
    assert {label.name for label in labels} == set(DEFAULT_LABELS)


async def test_seed_is_idempotent(db):
    await seed_defaults(db)
    await seed_defaults(db)

    assert len(await TaskStatusRepository(db).list_all()) == len(DEFAULT_STATUSES)
    assert len(await LabelRepository(db).list_all()) == len(DEFAULT_LABELS)
