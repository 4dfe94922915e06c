"""Authentication endpoints for the PatiDestek API."""

from fastapi import APIRouter, status

from patidestek.api.dependencies import CurrentUserDep, SessionDep
from patidestek.models import User
from patidestek.schemas.user import AuthResponse, LoginRequest, RegisterRequest, UserPublic
from patidestek.services import auth as auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, db: SessionDep) -> AuthResponse:
    """Create an account and return a bearer token for it.

    Args:
        payload: Name, email and password of the new account
        db: Database session

    Returns:
        Token plus the public view of the new user
    """
    return auth_service.register_user(db, payload)


@router.post("/login", response_model=AuthResponse)
async def login(payload: LoginRequest, db: SessionDep) -> AuthResponse:
    """Exchange email and password for a bearer token."""
    return auth_service.authenticate_user(db, payload)


@router.get("/me", response_model=UserPublic)
async def read_me(current_user: CurrentUserDep) -> User:
    """Return the authenticated user."""
    return current_user
