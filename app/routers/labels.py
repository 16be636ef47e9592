"""
Label endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.dependencies import get_current_user
from app.models.user import User
from app.schemas.label import LabelCreateRequest, LabelResponse, LabelUpdateRequest
from app.services.label_service import LabelService

router = APIRouter()


def get_label_service(db: AsyncSession = Depends(get_db)) -> LabelService:
    return LabelService(db=db)


@router.get("/labels", response_model=list[LabelResponse], summary="List labels")
async def list_labels(
    response: Response,
    _: User = Depends(get_current_user),
    service: LabelService = Depends(get_label_service),
) -> list[LabelResponse]:
    labels = await service.list_labels()
    response.headers["X-Total-Count"] = str(len(labels))
    return [LabelResponse.model_validate(label) for label in labels]


@router.get("/labels/{label_id}", response_model=LabelResponse, summary="Get label")
async def get_label(
    label_id: UUID,
    _: User = Depends(get_current_user),
    service: LabelService = Depends(get_label_service),
) -> LabelResponse:
    return LabelResponse.model_validate(await service.get_label(label_id))


@router.post(
    "/labels",
    response_model=LabelResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a label",
)
async def create_label(
    data: LabelCreateRequest,
    _: User = Depends(get_current_user),
    service: LabelService = Depends(get_label_service),
) -> LabelResponse:
    return LabelResponse.model_validate(await service.create_label(data))


@router.api_route(
    "/labels/{label_id}",
    methods=["PATCH", "PUT"],
    response_model=LabelResponse,
    summary="Update a label",
)
async def update_label(
    label_id: UUID,
    data: LabelUpdateRequest,
    _: User = Depends(get_current_user),
    service: LabelService = Depends(get_label_service),
) -> LabelResponse:
    return LabelResponse.model_validate(await service.update_label(label_id, data))


@router.delete(
    "/labels/{label_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a label",
)
async def delete_label(
    label_id: UUID,
    _: User = Depends(get_current_user),
    service: LabelService = Depends(get_label_service),
) -> None:
    """Refused with 409 while any task carries the label."""
    await service.delete_label(label_id)
