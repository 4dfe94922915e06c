"""User and authentication Pydantic schemas."""

import re
from datetime import datetime

from pydantic import Field, field_validator

from patidestek.models.user import UserRole

from .common import APIModel

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _normalize_email(value: str) -> str:
    value = value.strip().lower()
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Email must be a valid address")
    return value


class RegisterRequest(APIModel):
    """Schema for creating an account."""

    name: str = Field(..., min_length=2, max_length=100, description="Display name")
    email: str = Field(..., max_length=255, description="Unique login email")
    password: str = Field(..., min_length=6, max_length=128, description="Plain-text password")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        """Reject names that are blank once trimmed."""
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Name must contain at least 2 characters")
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Normalize and validate the email address."""
        return _normalize_email(v)


class LoginRequest(APIModel):
    """Schema for login submissions."""

    email: str = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class UserPublic(APIModel):
    """Public view of an account returned to its owner and admins."""

    id: int
    name: str
    email: str
    role: UserRole
    is_banned: bool


class UserAdminView(UserPublic):
    """Account row shown in the admin user list."""

    created_at: datetime


class AuthResponse(APIModel):
    """Token plus the authenticated user's public view."""

    token: str = Field(..., description="Signed bearer token")
    user: UserPublic


class RoleUpdate(APIModel):
    """Admin request to change an account role."""

    role: UserRole


class BanUpdate(APIModel):
    """Admin request to set or clear the ban flag."""

    is_banned: bool
