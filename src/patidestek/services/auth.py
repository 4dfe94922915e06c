"""Account registration and credential verification."""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from patidestek.core import security
from patidestek.core.errors import ConflictError, UnauthorizedError
from patidestek.db.integrity import commit_or_conflict
from patidestek.models.user import User, UserRole
from patidestek.schemas.user import AuthResponse, LoginRequest, RegisterRequest, UserPublic

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Email already exists"
INVALID_CREDENTIALS = "Invalid credentials"


def issue_auth_response(user: User) -> AuthResponse:
    """Build the token plus public view returned by register and login."""
    token = security.create_access_token(user.id, user.role.value)
    return AuthResponse(token=token, user=UserPublic.model_validate(user))


def register_user(db: Session, payload: RegisterRequest) -> AuthResponse:
    """Create an account with the default role and sign the caller in.

    Raises:
        ConflictError: If the email is already registered.
    """
    existing = db.scalars(select(User).where(User.email == payload.email)).first()
    if existing is not None:
        raise ConflictError(EMAIL_TAKEN)

    user = User(
        name=payload.name,
        email=payload.email,
        password_hash=security.hash_password(payload.password),
        role=UserRole.USER,
        is_banned=False,
    )
    db.add(user)
    commit_or_conflict(db, EMAIL_TAKEN)
    db.refresh(user)
    logger.info("Registered user id=%s", user.id)
    return issue_auth_response(user)


def authenticate_user(db: Session, payload: LoginRequest) -> AuthResponse:
    """Verify email/password and return a fresh token.

    Unknown emails and wrong passwords produce the same error.
    """
    user = db.scalars(select(User).where(User.email == payload.email)).first()
    if user is None or not security.verify_password(payload.password, user.password_hash):
        logger.info("Failed login attempt")
        raise UnauthorizedError(INVALID_CREDENTIALS)
    logger.info("User id=%s logged in", user.id)
    return issue_auth_response(user)
