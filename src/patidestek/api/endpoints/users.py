"""User account endpoints, mostly admin-only."""

from collections.abc import Sequence

from fastapi import APIRouter

from patidestek.api.dependencies import AdminUserDep, CurrentUserDep, PathId, SessionDep
from patidestek.models import User
from patidestek.schemas.user import BanUpdate, RoleUpdate, UserAdminView, UserPublic
from patidestek.services import users as user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserPublic)
async def read_current_user(current_user: CurrentUserDep) -> User:
    """Return the authenticated user."""
    return current_user


@router.get("", response_model=list[UserAdminView])
async def list_users(_: AdminUserDep, db: SessionDep) -> Sequence[User]:
    """List every account, newest first."""
    return user_service.list_users(db)


@router.patch("/{user_id}/role", response_model=UserPublic)
async def update_role(
    user_id: PathId,
    payload: RoleUpdate,
    _: AdminUserDep,
    db: SessionDep,
) -> User:
    """Promote or demote an account."""
    return user_service.set_role(db, user_id, payload.role)


@router.patch("/{user_id}/ban", response_model=UserPublic)
async def update_ban(
    user_id: PathId,
    payload: BanUpdate,
    _: AdminUserDep,
    db: SessionDep,
) -> User:
    """Ban or unban an account."""
    return user_service.set_banned(db, user_id, payload.is_banned)
