"""Domain exceptions raised by the service layer.

Each exception carries the HTTP status it maps to; the application registers a
single handler that renders them as ``{"detail": message}`` responses.
"""

from __future__ import annotations

from fastapi import status


class PatiDestekError(RuntimeError):
    """Base exception for expected request failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(PatiDestekError):
    """Raised when a referenced entity does not exist or is not visible."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(PatiDestekError):
    """Raised when a uniqueness constraint would be violated."""

    status_code = status.HTTP_409_CONFLICT


class InvalidStateError(PatiDestekError):
    """Raised when a listing cannot make the requested status transition."""

    status_code = status.HTTP_409_CONFLICT


class ForbiddenError(PatiDestekError):
    """Raised when the caller may not act on the target resource."""

    status_code = status.HTTP_403_FORBIDDEN


class UnauthorizedError(PatiDestekError):
    """Raised when credentials are missing or invalid."""

    status_code = status.HTTP_401_UNAUTHORIZED
