"""Shared API dependencies for authentication and authorization.

Guards chain in a fixed order: a route depending on ``require_admin`` or
``require_not_banned`` first resolves ``get_current_user``, so the first
failing check decides the response.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Path, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from patidestek.core.security import decode_access_token
from patidestek.db.session import get_db
from patidestek.models import User
from patidestek.schemas.common import MAX_DB_ID

BANNED_MESSAGE = "Your account has been banned. You cannot perform this action."

# auto_error=False so a missing header is a 401 rather than FastAPI's 403.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]

# Positive id within the INTEGER column range.
PathId = Annotated[int, Path(ge=1, le=MAX_DB_ID)]


def _credentials_error(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: SessionDep,
) -> User:
    """Get the current authenticated user from the bearer token.

    Args:
        credentials: HTTP Bearer token credentials, if any were sent
        db: Database session

    Returns:
        User object for the authenticated user

    Raises:
        HTTPException: If the token is missing, invalid or expired, or the
            user no longer exists
    """
    if credentials is None:
        raise _credentials_error("Not authenticated")
    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError as err:
        raise _credentials_error() from err

    subject = payload.get("sub")
    try:
        user_id = int(subject) if subject is not None else None
    except (TypeError, ValueError) as err:
        raise _credentials_error() from err
    if user_id is None:
        raise _credentials_error()

    user = db.get(User, user_id)
    if user is None:
        raise _credentials_error("User not found")
    return user


# Type alias for current user dependency
CurrentUserDep = Annotated[User, Depends(get_current_user)]


def require_not_banned(current_user: CurrentUserDep) -> User:
    """Reject banned accounts on content-creating routes."""
    if current_user.is_banned:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=BANNED_MESSAGE)
    return current_user


def require_admin(current_user: CurrentUserDep) -> User:
    """Allow only administrators."""
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required",
        )
    return current_user


ActiveUserDep = Annotated[User, Depends(require_not_banned)]
AdminUserDep = Annotated[User, Depends(require_admin)]
