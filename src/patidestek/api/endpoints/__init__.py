"""API endpoint modules."""

from .auth import router as auth_router
from .categories import router as categories_router
from .comment_reports import router as comment_reports_router
from .comments import router as comments_router
from .locations import router as locations_router
from .posts import router as posts_router
from .system import router as system_router
from .tags import router as tags_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "categories_router",
    "comment_reports_router",
    "comments_router",
    "locations_router",
    "posts_router",
    "system_router",
    "tags_router",
    "users_router",
]
