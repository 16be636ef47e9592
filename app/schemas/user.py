"""
User schemas.

Request/response models for user CRUD and the user list filter.
"""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.models.user import User, UserRole
from app.schemas.patch import PatchRequest


def _normalize_email(v: str | None) -> str | None:
    return v.lower() if v is not None else None


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------

class UserCreateRequest(BaseModel):
    """Request body for POST /users."""

    email: EmailStr
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    password: str = Field(min_length=3, max_length=128)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str | None) -> str | None:
        return _normalize_email(v)


# ---------------------------------------------------------------------------
# Update
# ---------------------------------------------------------------------------

class UserUpdateRequest(PatchRequest):
    """Request body for PATCH/PUT /users/{id}. Omitted keys are left untouched."""

    email: EmailStr | None = None
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    password: str | None = Field(default=None, min_length=3, max_length=128)
    role: UserRole | None = None

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str | None) -> str | None:
        return _normalize_email(v)


# ---------------------------------------------------------------------------
# List filter
# ---------------------------------------------------------------------------

class UserFilter(BaseModel):
    """Optional filters for GET /users. Every field set narrows the result (AND)."""

    id: UUID | None = None
    email: str | None = None
    email_cont: str | None = None
    first_name: str | None = None
    first_name_cont: str | None = None
    last_name: str | None = None
    last_name_cont: str | None = None
    created_at: date | None = None
    created_at_gt: date | None = None
    created_at_lt: date | None = None
    page: int = Field(default=1, ge=1)
    size: int = Field(default=10, ge=1, le=100)


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------

class UserResponse(BaseModel):
    """Public user representation. The password digest is never exposed."""

    id: UUID
    email: str
    first_name: str | None
    last_name: str | None
    role: UserRole
    created_at: datetime

    model_config = {"from_attributes": True}

    @classmethod
    def from_user(cls, user: User) -> UserResponse:
        return cls.model_validate(user)
