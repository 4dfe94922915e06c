"""Category endpoints: public listing, admin-only mutations."""

from collections.abc import Sequence

from fastapi import APIRouter, status

from patidestek.api.dependencies import AdminUserDep, PathId, SessionDep
from patidestek.models import Category
from patidestek.schemas.common import MessageResponse
from patidestek.schemas.taxonomy import CategoryResponse, NamePayload
from patidestek.services.taxonomy import category_service

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[CategoryResponse])
async def list_categories(db: SessionDep) -> Sequence[Category]:
    """Return every category ordered by id."""
    return category_service.list_all(db)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(payload: NamePayload, _: AdminUserDep, db: SessionDep) -> Category:
    return category_service.create(db, payload.name)


@router.patch("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: PathId,
    payload: NamePayload,
    _: AdminUserDep,
    db: SessionDep,
) -> Category:
    return category_service.update(db, category_id, payload.name)


@router.delete("/{category_id}", response_model=MessageResponse)
async def delete_category(category_id: PathId, _: AdminUserDep, db: SessionDep) -> MessageResponse:
    category_service.delete(db, category_id)
    return MessageResponse(message="Category deleted successfully")
