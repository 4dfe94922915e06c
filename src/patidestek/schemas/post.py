"""Listing-related Pydantic schemas."""

from datetime import datetime

from pydantic import Field, model_validator

from patidestek.models.post import PostStatus

from .common import APIModel, DbId
from .taxonomy import CategoryResponse, TagResponse

# Columns a partial update may explicitly clear.
NULLABLE_UPDATE_FIELDS = frozenset({"category_id", "image_url"})


class PostCreate(APIModel):
    """Schema for submitting a new listing for review."""

    title: str = Field(..., min_length=5, max_length=200)
    description: str = Field(..., min_length=10, max_length=10000)
    category_id: DbId | None = Field(None, description="Listing type")
    image_url: str | None = Field(None, max_length=1000, description="Hosted image URL")
    province_code: str = Field(..., min_length=1, max_length=10)
    province_name: str = Field(..., min_length=1, max_length=100)
    district_code: str = Field(..., min_length=1, max_length=10)
    district_name: str = Field(..., min_length=1, max_length=100)
    neighbourhood_name: str = Field(..., min_length=1, max_length=200)
    tag_ids: list[DbId] = Field(default_factory=list, description="Tags to attach")


class PostUpdate(APIModel):
    """Partial update of listing fields; status is never touched here."""

    title: str | None = Field(None, min_length=5, max_length=200)
    description: str | None = Field(None, min_length=10, max_length=10000)
    category_id: DbId | None = None
    image_url: str | None = Field(None, max_length=1000)
    province_code: str | None = Field(None, min_length=1, max_length=10)
    province_name: str | None = Field(None, min_length=1, max_length=100)
    district_code: str | None = Field(None, min_length=1, max_length=10)
    district_name: str | None = Field(None, min_length=1, max_length=100)
    neighbourhood_name: str | None = Field(None, min_length=1, max_length=200)

    @model_validator(mode="after")
    def _reject_null_required_fields(self) -> "PostUpdate":
        for field_name in self.model_fields_set:
            if field_name in NULLABLE_UPDATE_FIELDS:
                continue
            if getattr(self, field_name) is None:
                raise ValueError(f"{field_name} cannot be null")
        return self


class TagsUpdate(APIModel):
    """Full replacement of a listing's tag set."""

    tag_ids: list[DbId]


class RejectRequest(APIModel):
    """Optional moderator note stored with a rejection."""

    reason: str | None = Field(None, max_length=2000)


class OwnerSummary(APIModel):
    id: int
    name: str


class PostResponse(APIModel):
    """Public view of a listing."""

    id: int
    title: str
    description: str
    image_url: str | None
    province_code: str
    province_name: str
    district_code: str
    district_name: str
    neighbourhood_name: str
    created_at: datetime
    updated_at: datetime
    owner: OwnerSummary | None = None
    category: CategoryResponse | None = None
    tags: list[TagResponse] = Field(default_factory=list)


class PostDetailResponse(PostResponse):
    """Owner/admin view including moderation fields."""

    status: PostStatus
    rejection_reason: str | None = None


class PostPage(APIModel):
    """One page of public search results."""

    posts: list[PostResponse]
    total: int
    page: int
    limit: int
    total_pages: int
