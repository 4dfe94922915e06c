"""Category and tag Pydantic schemas."""

from pydantic import Field, field_validator

from .common import APIModel


class NamePayload(APIModel):
    """Create/update body shared by categories and tags."""

    name: str = Field(..., min_length=2, max_length=100)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Name must contain at least 2 characters")
        return v


class CategoryResponse(APIModel):
    id: int
    name: str


class TagResponse(APIModel):
    id: int
    name: str
