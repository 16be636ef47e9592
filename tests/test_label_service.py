"""
Label service: uniqueness and the delete guard.
"""

import uuid

import pytest

from app.core.exceptions import ConflictError, NotFoundError, ValidationFailedError
from app.schemas.label import LabelCreateRequest, LabelUpdateRequest
from app.schemas.task import TaskCreateRequest
from app.services.label_service import LabelService
from app.services.task_service import TaskService


@pytest.fixture
def service(db):
    return LabelService(db)


async def test_duplicate_name_conflicts_and_keeps_first(service):
    first = await service.create_label(LabelCreateRequest(name="bug"))

    with pytest.raises(ConflictError):
        await service.create_label(LabelCreateRequest(name="bug"))

    assert await service.list_labels() == [first]
    assert (await service.get_label(first.id)).name == "bug"


async def test_delete_attached_label_conflicts(db, service, make_status):
    await make_status("draft")
    label = await service.create_label(LabelCreateRequest(name="bug"))
    await TaskService(db).create_task(TaskCreateRequest(title="A", status="draft", label_ids=[label.id]))

    with pytest.raises(ConflictError) as exc:
        await service.delete_label(label.id)

    assert exc.value.message == "Cannot delete label with associated tasks"
    assert await service.get_label(label.id) is label


async def test_delete_unused_label(service):
    label = await service.create_label(LabelCreateRequest(name="bug"))
    await service.delete_label(label.id)
    with pytest.raises(NotFoundError):
        await service.get_label(label.id)


async def test_rename_to_own_name_is_not_a_conflict(service):
    label = await service.create_label(LabelCreateRequest(name="bug"))
    await service.update_label(label.id, LabelUpdateRequest(name="bug"))
    assert label.name == "bug"


async def test_rename_to_taken_name_conflicts(service):
    await service.create_label(LabelCreateRequest(name="bug"))
    feature = await service.create_label(LabelCreateRequest(name="feature"))

    with pytest.raises(ConflictError):
        await service.update_label(feature.id, LabelUpdateRequest(name="bug"))

    assert feature.name == "feature"


async def test_null_name_is_rejected(service):
    label = await service.create_label(LabelCreateRequest(name="bug"))
    with pytest.raises(ValidationFailedError) as exc:
        await service.update_label(label.id, LabelUpdateRequest.model_validate({"name": None}))
    assert "name" in exc.value.errors
    assert label.name == "bug"


async def test_absent_name_is_a_no_op(service):
    label = await service.create_label(LabelCreateRequest(name="bug"))
    await service.update_label(label.id, LabelUpdateRequest())
    assert label.name == "bug"


async def test_missing_label(service):
    with pytest.raises(NotFoundError) as exc:
        await service.get_label(uuid.uuid4())
    assert exc.value.code == "LABEL_NOT_FOUND"
