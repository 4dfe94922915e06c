"""Comment thread operations on approved listings."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from patidestek.core.errors import ForbiddenError, NotFoundError
from patidestek.models import Comment, Post, PostStatus, User

logger = logging.getLogger(__name__)


def _require_approved_post(db: Session, post_id: int) -> Post:
    post = db.get(Post, post_id)
    if post is None or post.status != PostStatus.APPROVED:
        raise NotFoundError("Post not found or not approved")
    return post


def list_comments(db: Session, post_id: int) -> Sequence[Comment]:
    """Return the comments of an approved listing, oldest first."""
    _require_approved_post(db, post_id)
    stmt = (
        select(Comment)
        .options(joinedload(Comment.user))
        .where(Comment.post_id == post_id)
        .order_by(Comment.created_at.asc(), Comment.id.asc())
    )
    return db.scalars(stmt).all()


def create_comment(db: Session, post_id: int, content: str, user: User) -> Comment:
    _require_approved_post(db, post_id)
    comment = Comment(content=content, post_id=post_id, user_id=user.id)
    db.add(comment)
    db.commit()
    db.refresh(comment)
    logger.debug("User id=%s commented on post id=%s", user.id, post_id)
    return comment


def delete_comment(db: Session, comment_id: int, user: User) -> None:
    """Delete a comment; only its author or an admin may do so."""
    comment = db.get(Comment, comment_id)
    if comment is None:
        raise NotFoundError("Comment not found")
    if comment.user_id != user.id and not user.is_admin:
        raise ForbiddenError("You can only delete your own comments")
    db.delete(comment)
    db.commit()
