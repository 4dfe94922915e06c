"""Comment report Pydantic schemas."""

from datetime import datetime

from pydantic import Field

from patidestek.models.comment_report import ReportReason, ReportStatus

from .comment import CommentAuthor
from .common import APIModel, DbId


class CommentReportCreate(APIModel):
    """Schema for flagging a comment."""

    comment_id: DbId
    reason: ReportReason
    details: str | None = Field(None, max_length=2000)


class ReportedComment(APIModel):
    id: int
    content: str
    post_id: int
    user: CommentAuthor | None = None


class CommentReportResponse(APIModel):
    """Report joined with the comment, its author and the reporter."""

    id: int
    reason: ReportReason
    details: str | None
    status: ReportStatus
    created_at: datetime
    comment: ReportedComment | None = None
    reporter: CommentAuthor | None = None
