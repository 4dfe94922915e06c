"""CRUD-style helpers for managing users."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from patidestek.core.errors import NotFoundError
from patidestek.models.user import User, UserRole

__all__ = [
    "get_user",
    "list_users",
    "set_role",
    "set_banned",
]

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> User:
    """Return a user by primary key or raise ``NotFoundError``."""
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def list_users(db: Session) -> Sequence[User]:
    """Return every account, newest first."""
    return db.scalars(select(User).order_by(User.created_at.desc(), User.id.desc())).all()


def set_role(db: Session, user_id: int, role: UserRole) -> User:
    """Change an account's role."""
    user = get_user(db, user_id)
    user.role = role
    db.commit()
    db.refresh(user)
    logger.info("User id=%s role set to %s", user.id, role.value)
    return user


def set_banned(db: Session, user_id: int, banned: bool) -> User:
    """Set or clear an account's ban flag."""
    user = get_user(db, user_id)
    user.is_banned = banned
    db.commit()
    db.refresh(user)
    logger.info("User id=%s banned=%s", user.id, banned)
    return user
