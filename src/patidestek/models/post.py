"""SQLAlchemy model for classified listings."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from patidestek.db.session import Base, utcnow

from .tag import post_tags

if TYPE_CHECKING:
    from .category import Category
    from .comment import Comment
    from .tag import Tag
    from .user import User


class PostStatus(str, Enum):
    """Moderation state of a listing.

    PENDING -> APPROVED | REJECTED via admin review; APPROVED -> RESOLVED once
    the owner or an admin closes the case.
    """

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    RESOLVED = "RESOLVED"


class Post(Base):
    """A lost, found, adoption or help listing."""

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[PostStatus] = mapped_column(
        SAEnum(PostStatus, name="post_status"),
        nullable=False,
        default=PostStatus.PENDING,
        index=True,
    )
    rejection_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    # Location is denormalized from the static fixtures at write time.
    province_code: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    province_name: Mapped[str] = mapped_column(String(100), nullable=False)
    district_code: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    district_name: Mapped[str] = mapped_column(String(100), nullable=False)
    neighbourhood_name: Mapped[str] = mapped_column(String(200), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    owner_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    category_id: Mapped[int | None] = mapped_column(
        ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True
    )

    owner: Mapped[User] = relationship("User", back_populates="posts")
    category: Mapped[Category | None] = relationship("Category", back_populates="posts")
    tags: Mapped[list[Tag]] = relationship(
        "Tag",
        secondary=post_tags,
        back_populates="posts",
        order_by="Tag.id",
    )
    comments: Mapped[list[Comment]] = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
    )
