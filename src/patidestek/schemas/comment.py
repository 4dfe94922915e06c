"""Comment-related Pydantic schemas."""

from datetime import datetime

from pydantic import Field, field_validator

from .common import APIModel


class CommentCreate(APIModel):
    content: str = Field(..., min_length=1, max_length=2000)

    @field_validator("content")
    @classmethod
    def strip_content(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Comment cannot be empty")
        return v


class CommentAuthor(APIModel):
    id: int
    name: str


class CommentResponse(APIModel):
    """Comment joined with its author's name."""

    id: int
    content: str
    created_at: datetime
    post_id: int
    user: CommentAuthor
