"""
List filters as composable predicates.

Each optional filter parameter becomes one boolean clause; a parameter that
was not supplied becomes ``true()``. The clauses are AND-ed, so filters are
always independent and conjunctive. Ordering and paging are applied later
by the repository.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, date, datetime, time, timedelta
from typing import Any
from uuid import UUID

from sqlalchemy import ColumnElement, String, and_, func, true

from app.models.label import Label
from app.models.task import Task
from app.models.task_status import TaskStatus
from app.models.user import User
from app.schemas.task import TaskFilter
from app.schemas.user import UserFilter

Predicate = ColumnElement[bool]


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------

def always() -> Predicate:
    return true()


def all_of(predicates: Iterable[Predicate]) -> Predicate:
    """AND-fold predicates. An empty input folds to the tautology."""
    return and_(true(), *predicates)


def equals(column: Any, value: Any) -> Predicate:
    if value is None:
        return always()
    return column == value


def contains_ci(column: Any, needle: str | None) -> Predicate:
    """Case-insensitive substring match. LIKE wildcards in ``needle`` match literally."""
    if not needle:
        return always()
    return func.lower(column, type_=String).contains(needle.lower(), autoescape=True)


def _day_start(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=UTC)


def on_day(column: Any, day: date | None) -> Predicate:
    if day is None:
        return always()
    start = _day_start(day)
    return and_(column >= start, column < start + timedelta(days=1))


def after_day(column: Any, day: date | None) -> Predicate:
    """Strictly later than the whole of ``day``."""
    if day is None:
        return always()
    return column >= _day_start(day) + timedelta(days=1)


def before_day(column: Any, day: date | None) -> Predicate:
    """Strictly earlier than the start of ``day``."""
    if day is None:
        return always()
    return column < _day_start(day)


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------

def task_title_contains(title_cont: str | None) -> Predicate:
    if title_cont is not None and not title_cont.strip():
        return always()
    return contains_ci(Task.name, title_cont)


def task_assigned_to(assignee_id: UUID | None) -> Predicate:
    return equals(Task.assignee_id, assignee_id)


def task_in_status(slug: str | None) -> Predicate:
    if not slug or not slug.strip():
        return always()
    return Task.status.has(TaskStatus.slug == slug)


def task_has_label(label_id: UUID | None) -> Predicate:
    # EXISTS over task_labels: a task matches when any of its labels has the id
    if label_id is None:
        return always()
    return Task.labels.any(Label.id == label_id)


def build_task_predicate(params: TaskFilter | None) -> Predicate:
    if params is None:
        return always()
    return all_of([
        task_title_contains(params.title_cont),
        task_assigned_to(params.assignee_id),
        task_in_status(params.status),
        task_has_label(params.label_id),
    ])


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

def build_user_predicate(params: UserFilter | None) -> Predicate:
    if params is None:
        return always()
    return all_of([
        equals(User.id, params.id),
        equals(User.email, params.email.lower() if params.email else None),
        contains_ci(User.email, params.email_cont),
        equals(User.first_name, params.first_name),
        contains_ci(User.first_name, params.first_name_cont),
        equals(User.last_name, params.last_name),
        contains_ci(User.last_name, params.last_name_cont),
        on_day(User.created_at, params.created_at),
        after_day(User.created_at, params.created_at_gt),
        before_day(User.created_at, params.created_at_lt),
    ])
