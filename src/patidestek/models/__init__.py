"""SQLAlchemy models for the PatiDestek application."""

from .category import Category
from .comment import Comment
from .comment_report import CommentReport, ReportReason, ReportStatus
from .post import Post, PostStatus
from .tag import Tag, post_tags
from .user import User, UserRole

__all__ = [
    "Category",
    "Comment",
    "CommentReport", "ReportReason", "ReportStatus",
    "Post", "PostStatus",
    "Tag", "post_tags",
    "User", "UserRole",
]
