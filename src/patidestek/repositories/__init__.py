"""Data access helpers."""

from .post_repo import PostFilters, PostRepository, TagLogic

__all__ = ["PostFilters", "PostRepository", "TagLogic"]
