# circussync/routers/users.py
from fastapi import APIRouter, Depends

from circussync.core.auth import require_admin, require_auth
from circussync.core.deps import get_user_service
from circussync.models.user import User
from circussync.schemas.user import UserProfileUpdate, UserRoleUpdate
from circussync.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


# -------- Self profile --------


@router.get("/me", response_model=User)
async def read_me(current_user: User = Depends(require_auth)):
    """
    Return the authenticated user's profile.

    The profile is provisioned (role "readonly") on the first request
    carrying a valid token.
    """
    return current_user


@router.patch("/me", response_model=User)
async def update_me(
    payload: UserProfileUpdate,
    service: UserService = Depends(get_user_service),
    current_user: User = Depends(require_auth),
):
    """Update the caller's `name` / `photo_url` (partial update)."""
    return await service.update_profile(current_user.id, payload)


# -------- Admin endpoints --------


@router.get(
    "",
    response_model=list[User],
    dependencies=[Depends(require_admin)],
)
async def list_users(service: UserService = Depends(get_user_service)):
    return await service.list_users()


@router.get(
    "/{user_id}",
    response_model=User,
    dependencies=[Depends(require_admin)],
)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    return await service.get_user_or_fail(user_id)


@router.patch("/{user_id}/role", response_model=User)
async def change_role(
    user_id: str,
    payload: UserRoleUpdate,
    service: UserService = Depends(get_user_service),
    current_user: User = Depends(require_auth),
):
    """
    Update a user's role (admin only).

    Allowed roles: readonly, performer, manager, admin.
    """
    return await service.update_role(current_user, user_id, payload.role)
