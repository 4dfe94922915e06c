"""Business logic for listings: public search, ownership and moderation."""
from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from patidestek.core.errors import (
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
)
from patidestek.models import Category, Post, PostStatus, Tag, User
from patidestek.repositories.post_repo import PostFilters, PostRepository, TagLogic
from patidestek.schemas.common import MAX_DB_ID
from patidestek.schemas.post import PostCreate, PostPage, PostResponse, PostUpdate

logger = logging.getLogger(__name__)

# Older clients send OR/AND instead of ANY/ALL.
_TAG_LOGIC_ALIASES = {
    "ANY": TagLogic.ANY,
    "OR": TagLogic.ANY,
    "ALL": TagLogic.ALL,
    "AND": TagLogic.ALL,
}


def parse_tag_ids(raw: str | None) -> tuple[int, ...]:
    """Parse a comma-separated id list, ignoring blanks and duplicates.

    Raises:
        ValueError: If a non-blank item is not an integer or is not a valid id.
    """
    if not raw:
        return ()
    ids: list[int] = []
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        try:
            value = int(item)
        except ValueError as exc:
            raise ValueError(f"Invalid tag id: {item!r}") from exc
        if not 1 <= value <= MAX_DB_ID:
            raise ValueError(f"Invalid tag id: {item!r}")
        if value not in ids:
            ids.append(value)
    return tuple(ids)


def parse_tag_logic(raw: str | None) -> TagLogic:
    """Return the tag combination mode; ANY when omitted."""
    if raw is None or not raw.strip():
        return TagLogic.ANY
    try:
        return _TAG_LOGIC_ALIASES[raw.strip().upper()]
    except KeyError as exc:
        raise ValueError("tagLogic must be ANY or ALL") from exc


def _ensure_category(db: Session, category_id: int | None) -> None:
    if category_id is not None and db.get(Category, category_id) is None:
        raise NotFoundError("Category not found")


def _resolve_tags(db: Session, tag_ids: Iterable[int]) -> list[Tag]:
    """Load tags for ``tag_ids``; every id must exist."""
    requested = list(dict.fromkeys(tag_ids))
    if not requested:
        return []
    tags = db.scalars(select(Tag).where(Tag.id.in_(requested))).all()
    found = {tag.id for tag in tags}
    missing = [tag_id for tag_id in requested if tag_id not in found]
    if missing:
        raise NotFoundError(f"Tags not found: {', '.join(str(i) for i in missing)}")
    return sorted(tags, key=lambda tag: tag.id)


def _ensure_can_manage(post: Post, user: User, action: str) -> None:
    if post.owner_id != user.id and not user.is_admin:
        raise ForbiddenError(f"You can only {action} your own posts")


def _load_post(db: Session, post_id: int) -> Post:
    post = PostRepository(db).get_by_id(post_id)
    if post is None:
        raise NotFoundError("Post not found")
    return post


def search_public_posts(db: Session, filters: PostFilters) -> PostPage:
    """Return one page of approved listings with pagination metadata."""
    posts, total = PostRepository(db).search(filters)
    return PostPage(
        posts=[PostResponse.model_validate(post) for post in posts],
        total=total,
        page=filters.page,
        limit=filters.limit,
        total_pages=math.ceil(total / filters.limit) if total else 0,
    )


def get_public_post(db: Session, post_id: int) -> Post:
    post = PostRepository(db).get_approved(post_id)
    if post is None:
        raise NotFoundError("Post not found or not approved")
    return post


def list_my_posts(db: Session, user: User) -> Sequence[Post]:
    return PostRepository(db).list_by_owner(user.id)


def get_my_post(db: Session, post_id: int, user: User) -> Post:
    post = PostRepository(db).get_owned(post_id, user.id)
    if post is None:
        raise NotFoundError("Post not found")
    return post


def create_post(db: Session, payload: PostCreate, user: User) -> Post:
    """Submit a listing for review.

    The listing always starts as PENDING; the category and every tag id must
    reference existing records.
    """
    _ensure_category(db, payload.category_id)
    tags = _resolve_tags(db, payload.tag_ids)

    post = Post(
        title=payload.title,
        description=payload.description,
        category_id=payload.category_id,
        image_url=payload.image_url,
        province_code=payload.province_code,
        province_name=payload.province_name,
        district_code=payload.district_code,
        district_name=payload.district_name,
        neighbourhood_name=payload.neighbourhood_name,
        status=PostStatus.PENDING,
        owner_id=user.id,
    )
    post.tags = tags
    db.add(post)
    db.commit()
    logger.info("User id=%s submitted post id=%s for review", user.id, post.id)
    return _load_post(db, post.id)


def update_post(db: Session, post_id: int, payload: PostUpdate, user: User) -> Post:
    """Apply a partial update; the moderation status is left untouched."""
    post = _load_post(db, post_id)
    _ensure_can_manage(post, user, "edit")

    changes = payload.model_dump(exclude_unset=True)
    if "category_id" in changes:
        _ensure_category(db, changes["category_id"])
    for field_name, value in changes.items():
        setattr(post, field_name, value)

    db.commit()
    return _load_post(db, post.id)


def replace_post_tags(db: Session, post_id: int, tag_ids: Sequence[int], user: User) -> Post:
    """Replace the full tag set of a listing; an empty list clears it."""
    post = _load_post(db, post_id)
    _ensure_can_manage(post, user, "edit")
    post.tags = _resolve_tags(db, tag_ids)
    db.commit()
    return _load_post(db, post.id)


def delete_post(db: Session, post_id: int, user: User) -> None:
    post = _load_post(db, post_id)
    _ensure_can_manage(post, user, "delete")
    db.delete(post)
    db.commit()
    logger.info("Post id=%s deleted by user id=%s", post_id, user.id)


def resolve_post(db: Session, post_id: int, user: User) -> Post:
    """Close an approved listing once the pet is reunited or adopted."""
    post = _load_post(db, post_id)
    _ensure_can_manage(post, user, "resolve")
    if post.status != PostStatus.APPROVED:
        raise InvalidStateError("Only approved posts can be resolved")
    post.status = PostStatus.RESOLVED
    db.commit()
    logger.info("Post id=%s resolved by user id=%s", post_id, user.id)
    return _load_post(db, post.id)


def list_pending_posts(db: Session) -> Sequence[Post]:
    return PostRepository(db).list_pending()


def _transition_pending(
    db: Session,
    post_id: int,
    target: PostStatus,
    reason: str | None = None,
) -> Post:
    post = _load_post(db, post_id)
    if post.status != PostStatus.PENDING:
        raise InvalidStateError(
            f"Post is {post.status.value.lower()}; only pending posts can be moderated"
        )
    post.status = target
    post.rejection_reason = reason if target == PostStatus.REJECTED else None
    db.commit()
    logger.info("Post id=%s moved from PENDING to %s", post_id, target.value)
    return _load_post(db, post.id)


def approve_post(db: Session, post_id: int) -> Post:
    """Publish a pending listing."""
    return _transition_pending(db, post_id, PostStatus.APPROVED)


def reject_post(db: Session, post_id: int, reason: str | None = None) -> Post:
    """Reject a pending listing, keeping the optional moderator note."""
    return _transition_pending(db, post_id, PostStatus.REJECTED, reason)
