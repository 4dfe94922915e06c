"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Primary keys are 32-bit INTEGER columns on PostgreSQL.
MAX_DB_ID = 2**31 - 1

DbId = Annotated[int, Field(ge=1, le=MAX_DB_ID)]


class APIModel(BaseModel):
    """Base schema emitting camelCase keys and accepting either casing."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(APIModel):
    """Plain acknowledgement returned by delete endpoints."""

    message: str = Field(..., description="Human-readable outcome")
