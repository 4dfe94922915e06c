"""SQLAlchemy model for listing comments."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from patidestek.db.session import Base, utcnow

if TYPE_CHECKING:
    from .comment_report import CommentReport
    from .post import Post
    from .user import User


class Comment(Base):
    """Flat comment left on an approved listing."""

    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    post_id: Mapped[int] = mapped_column(
        ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    post: Mapped[Post] = relationship("Post", back_populates="comments")
    user: Mapped[User] = relationship("User", back_populates="comments")
    reports: Mapped[list[CommentReport]] = relationship(
        "CommentReport",
        back_populates="comment",
        cascade="all, delete-orphan",
    )
