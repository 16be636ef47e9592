"""
HTTP surface: auth, status codes, error bodies and list headers.
"""

import uuid

import pytest

from app.core.security import hash_password
from app.models import TaskStatus, User, UserRole


@pytest.fixture
async def admin(seeded):
    return await seeded(User(
        email="admin@example.com", password_digest=hash_password("qwerty"), role=UserRole.ADMIN
    ))


@pytest.fixture
async def member(seeded):
    return await seeded(User(email="member@example.com", password_digest=hash_password("secret")))


@pytest.fixture
async def draft(seeded):
    return await seeded(TaskStatus(name="Draft", slug="draft"))


@pytest.fixture
def as_member(member, auth_headers):
    return auth_headers(member)


async def create_label(client, headers, name="bug"):
    resp = await client.post("/api/labels", json={"name": name}, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


async def create_task(client, headers, **fields):
    resp = await client.post("/api/tasks", json={"title": "A", "status": "draft", **fields}, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------

async def test_login_returns_bearer_token(client, member):
    resp = await client.post("/api/login", json={"username": "Member@example.com", "password": "secret"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["token_type"] == "bearer"

    me = await client.get(
        f"/api/users/{member.id}", headers={"Authorization": f"Bearer {body['access_token']}"}
    )
    assert me.status_code == 200
    assert me.json()["email"] == "member@example.com"


async def test_login_with_wrong_password(client, member):
    resp = await client.post("/api/login", json={"username": "member@example.com", "password": "nope"})
    assert resp.status_code == 401
    assert resp.json()["detail"]["code"] == "INVALID_CREDENTIALS"


async def test_missing_token(client):
    resp = await client.get("/api/tasks")
    assert resp.status_code == 401
    assert resp.json()["detail"]["code"] == "MISSING_TOKEN"


async def test_garbage_token(client):
    resp = await client.get("/api/tasks", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401
    assert resp.json()["detail"]["code"] == "INVALID_TOKEN"


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

async def test_registration_is_public_and_hides_password(client):
    resp = await client.post(
        "/api/users", json={"email": "New@Example.com", "password": "abc", "first_name": "New"}
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["email"] == "new@example.com"
    assert body["role"] == "USER"
    assert "password" not in body
    assert "password_digest" not in body


async def test_registration_rejects_malformed_email(client):
    resp = await client.post("/api/users", json={"email": "nope", "password": "abc"})
    assert resp.status_code == 422
    detail = resp.json()["detail"]
    assert detail["code"] == "VALIDATION_FAILED"
    assert "email" in detail["errors"]


async def test_user_list_sets_total_count(client, admin, member, as_member):
    resp = await client.get("/api/users", params={"email_cont": "member"}, headers=as_member)
    assert resp.status_code == 200
    assert resp.headers["X-Total-Count"] == "1"
    assert [u["email"] for u in resp.json()] == ["member@example.com"]


async def test_member_cannot_edit_someone_else(client, admin, as_member):
    resp = await client.patch(f"/api/users/{admin.id}", json={"first_name": "X"}, headers=as_member)
    assert resp.status_code == 403


async def test_member_cannot_change_own_role(client, member, as_member):
    resp = await client.patch(f"/api/users/{member.id}", json={"role": "ADMIN"}, headers=as_member)
    assert resp.status_code == 403
    assert resp.json()["detail"]["code"] == "INSUFFICIENT_ROLE"


async def test_admin_can_edit_anyone(client, admin, member, auth_headers):
    resp = await client.put(
        f"/api/users/{member.id}", json={"last_name": "Smith"}, headers=auth_headers(admin)
    )
    assert resp.status_code == 200
    assert resp.json()["last_name"] == "Smith"


async def test_null_email_patch_is_rejected(client, member, as_member):
    resp = await client.patch(f"/api/users/{member.id}", json={"email": None}, headers=as_member)
    assert resp.status_code == 422
    assert resp.json()["detail"]["errors"] == {"email": "must not be null"}


async def test_delete_assigned_user_conflicts(client, draft, member, as_member):
    await create_task(client, as_member, assignee_id=str(member.id))

    resp = await client.delete(f"/api/users/{member.id}", headers=as_member)

    assert resp.status_code == 409
    assert resp.json()["detail"] == {
        "code": "CONFLICT",
        "message": "Cannot delete user with assigned tasks",
    }


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------

async def test_task_crud(client, draft, member, as_member):
    label = await create_label(client, as_member)
    task = await create_task(
        client, as_member, content="body", assignee_id=str(member.id), label_ids=[label["id"]]
    )
    assert task["status"] == "draft"
    assert task["assignee_id"] == str(member.id)
    assert task["label_ids"] == [label["id"]]

    resp = await client.patch(
        f"/api/tasks/{task['id']}", json={"assignee_id": None, "label_ids": []}, headers=as_member
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["assignee_id"] is None
    assert body["label_ids"] == []
    assert body["content"] == "body"

    resp = await client.delete(f"/api/tasks/{task['id']}", headers=as_member)
    assert resp.status_code == 204
    resp = await client.get(f"/api/tasks/{task['id']}", headers=as_member)
    assert resp.status_code == 404
    assert resp.json()["detail"]["code"] == "TASK_NOT_FOUND"


async def test_bare_task_then_labels_in_a_later_request(client, draft, as_member):
    resp = await client.post("/api/tasks", json={"title": "A", "status": "draft"}, headers=as_member)
    assert resp.status_code == 201, resp.text
    task = resp.json()
    assert task["assignee_id"] is None
    assert task["label_ids"] == []

    label = await create_label(client, as_member)
    resp = await client.patch(
        f"/api/tasks/{task['id']}", json={"label_ids": [label["id"]]}, headers=as_member
    )
    assert resp.status_code == 200, resp.text
    assert resp.json()["label_ids"] == [label["id"]]
    assert resp.json()["title"] == "A"


async def test_task_list_filters_and_total(client, draft, as_member):
    await create_task(client, as_member, title="Create user authentication filter")
    await create_task(client, as_member, title="Write docs")

    resp = await client.get("/api/tasks", params={"title_cont": "AUTH", "status": "draft"}, headers=as_member)

    assert resp.status_code == 200
    assert resp.headers["X-Total-Count"] == "1"
    assert [t["title"] for t in resp.json()] == ["Create user authentication filter"]


async def test_unknown_status_on_create(client, as_member):
    resp = await client.post("/api/tasks", json={"title": "A", "status": "nope"}, headers=as_member)
    assert resp.status_code == 404
    assert resp.json()["detail"]["code"] == "TASK_STATUS_NOT_FOUND"


async def test_failed_patch_changes_nothing(client, draft, as_member):
    task = await create_task(client, as_member)

    resp = await client.patch(
        f"/api/tasks/{task['id']}",
        json={"title": "B", "label_ids": [str(uuid.uuid4())]},
        headers=as_member,
    )
    assert resp.status_code == 404
    assert resp.json()["detail"]["code"] == "LABEL_NOT_FOUND"

    resp = await client.get(f"/api/tasks/{task['id']}", headers=as_member)
    assert resp.json()["title"] == "A"


async def test_null_status_patch_is_rejected(client, draft, as_member):
    task = await create_task(client, as_member)
    resp = await client.patch(f"/api/tasks/{task['id']}", json={"status": None}, headers=as_member)
    assert resp.status_code == 422
    assert resp.json()["detail"]["errors"] == {"status": "must not be null"}


# ---------------------------------------------------------------------------
# Labels and statuses
# ---------------------------------------------------------------------------

async def test_duplicate_label_conflicts(client, as_member):
    await create_label(client, as_member)
    resp = await client.post("/api/labels", json={"name": "bug"}, headers=as_member)
    assert resp.status_code == 409

    resp = await client.get("/api/labels", headers=as_member)
    assert resp.headers["X-Total-Count"] == "1"


async def test_short_label_name_is_rejected(client, as_member):
    resp = await client.post("/api/labels", json={"name": "ab"}, headers=as_member)
    assert resp.status_code == 422
    assert "name" in resp.json()["detail"]["errors"]


async def test_delete_attached_label_conflicts(client, draft, as_member):
    label = await create_label(client, as_member)
    await create_task(client, as_member, label_ids=[label["id"]])

    resp = await client.delete(f"/api/labels/{label['id']}", headers=as_member)
    assert resp.status_code == 409

    resp = await client.get(f"/api/labels/{label['id']}", headers=as_member)
    assert resp.status_code == 200


async def test_delete_status_in_use_conflicts(client, draft, as_member):
    await create_task(client, as_member)
    resp = await client.delete(f"/api/task_statuses/{draft.id}", headers=as_member)
    assert resp.status_code == 409
    assert resp.json()["detail"]["message"] == "Cannot delete task status with associated tasks"


async def test_status_crud(client, as_member):
    resp = await client.post(
        "/api/task_statuses", json={"name": "Published", "slug": "published"}, headers=as_member
    )
    assert resp.status_code == 201
    status_id = resp.json()["id"]

    resp = await client.patch(f"/api/task_statuses/{status_id}", json={"name": "Live"}, headers=as_member)
    assert resp.status_code == 200
    assert (resp.json()["name"], resp.json()["slug"]) == ("Live", "published")

    resp = await client.delete(f"/api/task_statuses/{status_id}", headers=as_member)
    assert resp.status_code == 204
    resp = await client.get(f"/api/task_statuses/{status_id}", headers=as_member)
    assert resp.status_code == 404
    assert resp.json()["detail"]["code"] == "TASK_STATUS_NOT_FOUND"
