"""Comment endpoints nested under listings."""

from collections.abc import Sequence

from fastapi import APIRouter, status

from patidestek.api.dependencies import ActiveUserDep, CurrentUserDep, PathId, SessionDep
from patidestek.models import Comment
from patidestek.schemas.comment import CommentCreate, CommentResponse
from patidestek.schemas.common import MessageResponse
from patidestek.services import comments as comment_service

router = APIRouter(tags=["comments"])


@router.get("/posts/{post_id}/comments", response_model=list[CommentResponse])
async def list_comments(post_id: PathId, db: SessionDep) -> Sequence[Comment]:
    """Return the comments of an approved listing, oldest first."""
    return comment_service.list_comments(db, post_id)


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: PathId,
    payload: CommentCreate,
    current_user: ActiveUserDep,
    db: SessionDep,
) -> Comment:
    return comment_service.create_comment(db, post_id, payload.content, current_user)


@router.delete("/comments/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    comment_id: PathId,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MessageResponse:
    """Delete a comment; authors and admins only."""
    comment_service.delete_comment(db, comment_id, current_user)
    return MessageResponse(message="Comment deleted successfully")
