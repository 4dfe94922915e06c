"""Password hashing and bearer token helpers."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import jwt
from passlib.context import CryptContext

from patidestek.core.settings import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(raw: str) -> str:
    """Return an adaptive bcrypt hash of the supplied password."""
    return pwd_context.hash(raw)


def verify_password(raw: str, hashed: str) -> bool:
    """Return True if ``raw`` matches the stored hash."""
    try:
        return pwd_context.verify(raw, hashed)
    except ValueError:
        # Unrecognised or corrupt hash in storage.
        return False


def create_access_token(user_id: int, role: str, expires_minutes: int | None = None) -> str:
    """Create a signed JWT carrying the user id and role.

    Args:
        user_id: Primary key of the authenticated user.
        role: Role value at the time of issuance.
        expires_minutes: Optional override of the configured lifetime.

    Returns:
        Encoded JWT string.
    """
    lifetime = expires_minutes if expires_minutes is not None else settings.access_token_expire_minutes
    now = datetime.now(UTC)
    to_encode: dict[str, Any] = {
        "sub": str(user_id),
        "role": role,
        "iat": now,
        "exp": now + timedelta(minutes=lifetime),
    }
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_access_token(token: str) -> dict[str, Any]:
    """Decode and verify a JWT, raising ``JWTError`` on any failure."""
    payload: dict[str, Any] = jwt.decode(
        token,
        settings.secret_key,
        algorithms=[settings.jwt_algorithm],
    )
    return payload
