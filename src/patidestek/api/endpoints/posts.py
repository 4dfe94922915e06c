"""Listing endpoints: public search, the owner's own listings and moderation."""

from collections.abc import Sequence

from fastapi import APIRouter, HTTPException, Query, status

from patidestek.api.dependencies import (
    ActiveUserDep,
    AdminUserDep,
    CurrentUserDep,
    PathId,
    SessionDep,
)
from patidestek.core.settings import settings
from patidestek.models import Post
from patidestek.repositories.post_repo import PostFilters
from patidestek.schemas.common import MAX_DB_ID, MessageResponse
from patidestek.schemas.post import (
    PostCreate,
    PostDetailResponse,
    PostPage,
    PostResponse,
    PostUpdate,
    RejectRequest,
    TagsUpdate,
)
from patidestek.services import posts as post_service

router = APIRouter(tags=["posts"])


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


@router.get("/posts", response_model=PostPage)
async def search_posts(
    db: SessionDep,
    search: str | None = Query(None, max_length=200, description="Title/description substring"),
    category_id: int | None = Query(None, alias="categoryId", ge=1, le=MAX_DB_ID),
    tag_ids: str | None = Query(None, alias="tagIds", description="Comma-separated tag ids"),
    tag_logic: str | None = Query(None, alias="tagLogic", description="ANY or ALL"),
    province_code: str | None = Query(None, alias="provinceCode"),
    district_code: str | None = Query(None, alias="districtCode"),
    neighbourhood_name: str | None = Query(None, alias="neighbourhoodName"),
    page: int = Query(1, ge=1, le=MAX_DB_ID),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
) -> PostPage:
    """Search approved listings.

    Args:
        db: Database session
        search: Case-insensitive substring matched against title or description
        category_id: Restrict to one category
        tag_ids: Comma-separated tag ids
        tag_logic: ANY (at least one tag) or ALL (every tag); OR/AND accepted
        province_code: Exact province code
        district_code: Exact district code
        neighbourhood_name: Exact neighbourhood name
        page: 1-based page number
        limit: Page size

    Returns:
        One page of listings with total count and page metadata

    Raises:
        HTTPException: If the tag ids or tag logic cannot be parsed
    """
    try:
        parsed_tag_ids = post_service.parse_tag_ids(tag_ids)
        parsed_logic = post_service.parse_tag_logic(tag_logic)
    except ValueError as err:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(err),
        ) from err

    filters = PostFilters(
        search=_clean(search),
        category_id=category_id,
        tag_ids=parsed_tag_ids,
        tag_logic=parsed_logic,
        province_code=_clean(province_code),
        district_code=_clean(district_code),
        neighbourhood_name=_clean(neighbourhood_name),
        page=page,
        limit=limit,
    )
    return post_service.search_public_posts(db, filters)


@router.get("/posts/{post_id}", response_model=PostResponse)
async def get_post(post_id: PathId, db: SessionDep) -> Post:
    """Return one approved listing."""
    return post_service.get_public_post(db, post_id)


@router.post("/posts", response_model=PostDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_post(payload: PostCreate, current_user: ActiveUserDep, db: SessionDep) -> Post:
    """Submit a listing; it stays hidden until an admin approves it."""
    return post_service.create_post(db, payload, current_user)


@router.patch("/posts/{post_id}", response_model=PostDetailResponse)
async def update_post(
    post_id: PathId,
    payload: PostUpdate,
    current_user: ActiveUserDep,
    db: SessionDep,
) -> Post:
    return post_service.update_post(db, post_id, payload, current_user)


@router.put("/posts/{post_id}/tags", response_model=PostDetailResponse)
async def replace_tags(
    post_id: PathId,
    payload: TagsUpdate,
    current_user: ActiveUserDep,
    db: SessionDep,
) -> Post:
    """Replace the whole tag set of a listing."""
    return post_service.replace_post_tags(db, post_id, payload.tag_ids, current_user)


@router.patch("/posts/{post_id}/resolve", response_model=PostDetailResponse)
async def resolve_post(post_id: PathId, current_user: CurrentUserDep, db: SessionDep) -> Post:
    """Mark an approved listing as resolved (reunited or adopted)."""
    return post_service.resolve_post(db, post_id, current_user)


@router.delete("/posts/{post_id}", response_model=MessageResponse)
async def delete_post(post_id: PathId, current_user: CurrentUserDep, db: SessionDep) -> MessageResponse:
    post_service.delete_post(db, post_id, current_user)
    return MessageResponse(message="Post deleted successfully")


@router.get("/my/posts", response_model=list[PostDetailResponse])
async def list_my_posts(current_user: CurrentUserDep, db: SessionDep) -> Sequence[Post]:
    """Return the caller's listings in every status, newest first."""
    return post_service.list_my_posts(db, current_user)


@router.get("/my/posts/{post_id}", response_model=PostDetailResponse)
async def get_my_post(post_id: PathId, current_user: CurrentUserDep, db: SessionDep) -> Post:
    return post_service.get_my_post(db, post_id, current_user)


@router.get("/admin/posts/pending", response_model=list[PostDetailResponse])
async def list_pending_posts(_: AdminUserDep, db: SessionDep) -> Sequence[Post]:
    """Return the moderation queue, oldest first."""
    return post_service.list_pending_posts(db)


@router.patch("/admin/posts/{post_id}/approve", response_model=PostDetailResponse)
async def approve_post(post_id: PathId, _: AdminUserDep, db: SessionDep) -> Post:
    return post_service.approve_post(db, post_id)


@router.patch("/admin/posts/{post_id}/reject", response_model=PostDetailResponse)
async def reject_post(
    post_id: PathId,
    _: AdminUserDep,
    db: SessionDep,
    payload: RejectRequest | None = None,
) -> Post:
    """Reject a pending listing with an optional reason."""
    reason = _clean(payload.reason) if payload is not None else None
    return post_service.reject_post(db, post_id, reason)
