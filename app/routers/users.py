"""
User endpoints.

Registration is public; listing and reading need a token; update and delete
are limited to the account owner or an admin.
"""

from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import get_db
from app.core.dependencies import ensure_admin, ensure_admin_or_self, get_current_user
from app.models.user import User
from app.schemas.user import UserCreateRequest, UserFilter, UserResponse, UserUpdateRequest
from app.services.user_service import UserService

router = APIRouter()


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db=db)


# ---------------------------------------------------------------------------
# List Users
# ---------------------------------------------------------------------------

@router.get("/users", response_model=list[UserResponse], summary="List users")
async def list_users(
    response: Response,
    id: UUID | None = Query(default=None),
    email: str | None = Query(default=None),
    email_cont: str | None = Query(default=None),
    first_name: str | None = Query(default=None),
    first_name_cont: str | None = Query(default=None),
    last_name: str | None = Query(default=None),
    last_name_cont: str | None = Query(default=None),
    created_at: date | None = Query(default=None),
    created_at_gt: date | None = Query(default=None),
    created_at_lt: date | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    size: int = Query(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=100),
    _: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    params = UserFilter(
        id=id,
        email=email,
        email_cont=email_cont,
        first_name=first_name,
        first_name_cont=first_name_cont,
        last_name=last_name,
        last_name_cont=last_name_cont,
        created_at=created_at,
        created_at_gt=created_at_gt,
        created_at_lt=created_at_lt,
        page=page,
        size=size,
    )
    users, total = await service.list_users(params)
    response.headers["X-Total-Count"] = str(total)
    return [UserResponse.from_user(u) for u in users]


@router.get("/users/{user_id}", response_model=UserResponse, summary="Get user")
async def get_user(
    user_id: UUID,
    _: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return UserResponse.from_user(await service.get_user(user_id))


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def create_user(
    data: UserCreateRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return UserResponse.from_user(await service.create_user(data))


@router.api_route(
    "/users/{user_id}",
    methods=["PATCH", "PUT"],
    response_model=UserResponse,
    summary="Update a user",
)
async def update_user(
    user_id: UUID,
    data: UserUpdateRequest,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    ensure_admin_or_self(current_user, user_id)
    if data.patch("role").is_explicit:
        ensure_admin(current_user)
    return UserResponse.from_user(await service.update_user(user_id, data))


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
)
async def delete_user(
    user_id: UUID,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> None:
    ensure_admin_or_self(current_user, user_id)
    await service.delete_user(user_id)
