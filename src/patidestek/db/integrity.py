"""Helpers translating storage-level constraint violations."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from patidestek.core.errors import ConflictError

logger = logging.getLogger(__name__)


def commit_or_conflict(db: Session, message: str) -> None:
    """Commit the session, surfacing unique violations as ``ConflictError``.

    The service-level existence checks race with concurrent writers; the
    database constraint is the source of truth.
    """
    try:
        db.commit()
    except IntegrityError as err:
        db.rollback()
        logger.warning("Integrity violation on commit: %s", err.orig)
        raise ConflictError(message) from err
