"""
User business logic.

Handles user CRUD. Passwords are hashed here and never leave this module in
clear text; deletes are refused while any task is assigned to the user.
"""

from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError, ValidationFailedError
from app.core.security import hash_password
from app.models.user import User, UserRole
from app.repositories import TaskRepository, UserRepository
from app.schemas.user import UserCreateRequest, UserFilter, UserUpdateRequest
from app.services.filters import build_user_predicate
from app.services.integrity import ReferenceGuard

logger = logging.getLogger(__name__)

REQUIRED_USER_FIELDS = ("email", "password", "role")


class UserService:
    """Handles all user operations."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.users = UserRepository(db)
        self.guard = ReferenceGuard(TaskRepository(db))

    async def list_users(self, params: UserFilter | None = None) -> tuple[list[User], int]:
        params = params or UserFilter()
        return await self.users.find_matching(
            build_user_predicate(params),
            page=params.page,
            page_size=params.size,
        )

    async def get_user(self, user_id: UUID) -> User:
        user = await self.users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def create_user(self, data: UserCreateRequest, role: UserRole = UserRole.USER) -> User:
        if await self.users.exists_by_email(data.email):
            raise ConflictError(f"User with email {data.email} already exists")

        user = User(
            email=data.email,
            first_name=data.first_name,
            last_name=data.last_name,
            password_digest=hash_password(data.password),
            role=role,
        )
        await self.users.save(user)
        logger.info("User created: user_id=%s", user.id)
        return user

    async def update_user(self, user_id: UUID, data: UserUpdateRequest) -> User:
        """
        Partially update a user.

        first_name/last_name may be cleared with null; email, password and
        role may not. Changing the email to the one the user already has is
        not a conflict.
        """
        user = await self.get_user(user_id)
        if data.is_empty:
            return user

        cleared = data.cleared(REQUIRED_USER_FIELDS)
        if cleared:
            raise ValidationFailedError(errors={name: "must not be null" for name in cleared})

        email = data.patch("email")
        if email.is_set and email.value != user.email:
            if await self.users.exists_by_email(email.value):
                raise ConflictError(f"User with email {email.value} already exists")

        password = data.patch("password")
        digest = hash_password(password.value) if password.is_set else None

        if email.is_set:
            user.email = email.value
        for field in ("first_name", "last_name"):
            patch = data.patch(field)
            if patch.is_explicit:
                setattr(user, field, patch.value)
        if digest is not None:
            user.password_digest = digest
        role = data.patch("role")
        if role.is_set:
            user.role = role.value

        await self.users.save(user)
        return user

    async def delete_user(self, user_id: UUID) -> None:
        user = await self.get_user(user_id)
        await self.guard.ensure_user_unreferenced(user)
        await self.users.delete(user)
        logger.info("User deleted: user_id=%s", user_id)
