"""Data access helpers for working with posts."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from sqlalchemy import Select, distinct, func, or_, select
from sqlalchemy.orm import Session, joinedload, selectinload

from patidestek.models.post import Post, PostStatus
from patidestek.models.tag import post_tags

__all__ = ["PostFilters", "PostRepository", "TagLogic"]


class TagLogic(str, Enum):
    """How multiple requested tags combine when filtering listings."""

    ANY = "ANY"
    ALL = "ALL"


@dataclass(frozen=True)
class PostFilters:
    """Criteria accepted by the public listing search."""

    search: str | None = None
    category_id: int | None = None
    tag_ids: tuple[int, ...] = field(default_factory=tuple)
    tag_logic: TagLogic = TagLogic.ANY
    province_code: str | None = None
    district_code: str | None = None
    neighbourhood_name: str | None = None
    page: int = 1
    limit: int = 12


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    @staticmethod
    def _with_relations(stmt: Select[tuple[Post]]) -> Select[tuple[Post]]:
        return stmt.options(
            joinedload(Post.owner),
            joinedload(Post.category),
            selectinload(Post.tags),
        )

    def get_by_id(self, post_id: int) -> Post | None:
        """Return a post by identifier regardless of status."""
        return self.session.scalars(
            self._with_relations(select(Post).where(Post.id == post_id))
        ).first()

    def get_approved(self, post_id: int) -> Post | None:
        """Return a post only if it is publicly visible."""
        return self.session.scalars(
            self._with_relations(
                select(Post).where(Post.id == post_id, Post.status == PostStatus.APPROVED)
            )
        ).first()

    def get_owned(self, post_id: int, owner_id: int) -> Post | None:
        """Return a post only if it belongs to ``owner_id``."""
        return self.session.scalars(
            self._with_relations(
                select(Post).where(Post.id == post_id, Post.owner_id == owner_id)
            )
        ).first()

    def list_by_owner(self, owner_id: int) -> Sequence[Post]:
        """Return every post of an owner, newest first."""
        stmt = (
            select(Post)
            .where(Post.owner_id == owner_id)
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        return self.session.scalars(self._with_relations(stmt)).all()

    def list_pending(self) -> Sequence[Post]:
        """Return the moderation queue, oldest first."""
        stmt = (
            select(Post)
            .where(Post.status == PostStatus.PENDING)
            .order_by(Post.created_at.asc(), Post.id.asc())
        )
        return self.session.scalars(self._with_relations(stmt)).all()

    def search(self, filters: PostFilters) -> tuple[Sequence[Post], int]:
        """Return one page of approved posts matching ``filters`` and the total count.

        Tag matching is expressed as ``post.id IN (subquery)`` so a post matching
        several requested tags still yields a single row.
        """
        stmt = select(Post).where(Post.status == PostStatus.APPROVED)

        if filters.search:
            pattern = f"%{_escape_like(filters.search)}%"
            stmt = stmt.where(
                or_(
                    Post.title.ilike(pattern, escape="\\"),
                    Post.description.ilike(pattern, escape="\\"),
                )
            )

        if filters.category_id is not None:
            stmt = stmt.where(Post.category_id == filters.category_id)

        if filters.tag_ids:
            requested = sorted(set(filters.tag_ids))
            matching = select(post_tags.c.post_id).where(post_tags.c.tag_id.in_(requested))
            if filters.tag_logic is TagLogic.ALL:
                matching = matching.group_by(post_tags.c.post_id).having(
                    func.count(distinct(post_tags.c.tag_id)) == len(requested)
                )
            stmt = stmt.where(Post.id.in_(matching))

        if filters.province_code:
            stmt = stmt.where(Post.province_code == filters.province_code)
        if filters.district_code:
            stmt = stmt.where(Post.district_code == filters.district_code)
        if filters.neighbourhood_name:
            stmt = stmt.where(Post.neighbourhood_name == filters.neighbourhood_name)

        total = self.session.scalar(select(func.count()).select_from(stmt.subquery())) or 0

        page_stmt = (
            self._with_relations(stmt)
            .order_by(Post.created_at.desc(), Post.id.desc())
            .offset((filters.page - 1) * filters.limit)
            .limit(filters.limit)
        )
        return self.session.scalars(page_stmt).all(), int(total)
