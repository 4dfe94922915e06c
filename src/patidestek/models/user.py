"""SQLAlchemy models for user accounts."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from patidestek.db.session import Base, utcnow

if TYPE_CHECKING:
    from .comment import Comment
    from .comment_report import CommentReport
    from .post import Post


class UserRole(str, Enum):
    """Access level of an account."""

    USER = "USER"
    ADMIN = "ADMIN"


class User(Base):
    """Registered account able to publish listings and comments."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    # Never serialized; response schemas do not declare it.
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[UserRole] = mapped_column(
        SAEnum(UserRole, name="user_role"),
        nullable=False,
        default=UserRole.USER,
    )
    is_banned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    posts: Mapped[list[Post]] = relationship(
        "Post",
        back_populates="owner",
        cascade="all, delete-orphan",
    )
    comments: Mapped[list[Comment]] = relationship(
        "Comment",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    reports: Mapped[list[CommentReport]] = relationship(
        "CommentReport",
        back_populates="reporter",
        cascade="all, delete-orphan",
    )

    @property
    def is_admin(self) -> bool:
        """Return True if the account carries the admin role."""
        return self.role == UserRole.ADMIN
