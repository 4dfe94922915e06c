"""SQLAlchemy model for user-submitted comment reports."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Text
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from patidestek.db.session import Base, utcnow

if TYPE_CHECKING:
    from .comment import Comment
    from .user import User


class ReportReason(str, Enum):
    SPAM = "SPAM"
    ABUSE = "ABUSE"
    PERSONAL_INFO = "PERSONAL_INFO"
    OTHER = "OTHER"


class ReportStatus(str, Enum):
    OPEN = "OPEN"
    RESOLVED = "RESOLVED"


class CommentReport(Base):
    """Report flagging a comment for admin review."""

    __tablename__ = "comment_reports"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    reason: Mapped[ReportReason] = mapped_column(
        SAEnum(ReportReason, name="report_reason"), nullable=False
    )
    details: Mapped[str | None] = mapped_column(Text, nullable=True)
    # OPEN -> RESOLVED only; there is no way back.
    status: Mapped[ReportStatus] = mapped_column(
        SAEnum(ReportStatus, name="report_status"),
        nullable=False,
        default=ReportStatus.OPEN,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    comment_id: Mapped[int] = mapped_column(
        ForeignKey("comments.id", ondelete="CASCADE"), nullable=False, index=True
    )
    reporter_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    comment: Mapped[Comment] = relationship("Comment", back_populates="reports")
    reporter: Mapped[User] = relationship("User", back_populates="reports")
