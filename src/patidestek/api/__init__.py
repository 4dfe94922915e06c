"""HTTP API routers."""

from .endpoints import (
    auth_router,
    categories_router,
    comment_reports_router,
    comments_router,
    locations_router,
    posts_router,
    system_router,
    tags_router,
    users_router,
)

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
