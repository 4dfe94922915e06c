"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .comment import CommentAuthor, CommentCreate, CommentResponse
from .comment_report import CommentReportCreate, CommentReportResponse
from .common import MAX_DB_ID, APIModel, DbId, MessageResponse
from .location import DistrictResponse, NeighbourhoodResponse, ProvinceResponse
from .post import (
    PostCreate,
    PostDetailResponse,
    PostPage,
    PostResponse,
    PostUpdate,
    RejectRequest,
    TagsUpdate,
)
from .taxonomy import CategoryResponse, NamePayload, TagResponse
from .user import (
    AuthResponse,
    BanUpdate,
    LoginRequest,
    RegisterRequest,
    RoleUpdate,
    UserAdminView,
    UserPublic,
)

__all__ = [
    "MAX_DB_ID", "APIModel", "DbId", "MessageResponse",
    "AuthResponse", "BanUpdate", "LoginRequest", "RegisterRequest", "RoleUpdate",
    "UserAdminView", "UserPublic",
    "CategoryResponse", "NamePayload", "TagResponse",
    "PostCreate", "PostDetailResponse", "PostPage", "PostResponse", "PostUpdate",
    "RejectRequest", "TagsUpdate",
    "CommentAuthor", "CommentCreate", "CommentResponse",
    "CommentReportCreate", "CommentReportResponse",
    "DistrictResponse", "NeighbourhoodResponse", "ProvinceResponse",
]
