"""Tag endpoints.

Tags are free-form attribute labels attached to listings (species, age,
medical need). Anyone may read them; only admins maintain the list.
"""

from collections.abc import Sequence

from fastapi import APIRouter, status

from patidestek.api.dependencies import AdminUserDep, PathId, SessionDep
from patidestek.models import Tag
from patidestek.schemas.common import MessageResponse
from patidestek.schemas.taxonomy import NamePayload, TagResponse
from patidestek.services.taxonomy import tag_service

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("", response_model=list[TagResponse])
async def list_tags(db: SessionDep) -> Sequence[Tag]:
    return tag_service.list_all(db)


@router.post("", response_model=TagResponse, status_code=status.HTTP_201_CREATED)
async def create_tag(payload: NamePayload, _: AdminUserDep, db: SessionDep) -> Tag:
    return tag_service.create(db, payload.name)


@router.patch("/{tag_id}", response_model=TagResponse)
async def update_tag(
    tag_id: PathId,
    payload: NamePayload,
    _: AdminUserDep,
    db: SessionDep,
) -> Tag:
    return tag_service.update(db, tag_id, payload.name)


@router.delete("/{tag_id}", response_model=MessageResponse)
async def delete_tag(tag_id: PathId, _: AdminUserDep, db: SessionDep) -> MessageResponse:
    """Delete a tag and detach it from every listing."""
    tag_service.delete(db, tag_id)
    return MessageResponse(message="Tag deleted successfully")
