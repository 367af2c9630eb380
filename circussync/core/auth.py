# circussync/core/auth.py
from typing import Any, Callable

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError

from circussync.core.config import get_settings
from circussync.core.deps import get_user_service
from circussync.core.identity import ProviderIdentity
from circussync.core.roles import HIGHEST_ROLE, Role, has_role
from circussync.models.user import User
from circussync.services.user_service import UserService

# auto_error=False => a missing Authorization header reaches
# get_current_user as None and require_auth answers 401 itself.
bearer_scheme = HTTPBearer(auto_error=False)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and verify a Supabase access token (JWT).

    Verification:
      - signature (SUPABASE_JWT_ALG using SUPABASE_JWT_SECRET)
      - expiration time (exp)
      - audience is NOT verified (Supabase 'aud' may vary)

    Raises:
        HTTPException(401): if token is invalid/expired.
    """
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.SUPABASE_JWT_SECRET,
            algorithms=[settings.SUPABASE_JWT_ALG],
            options={"verify_aud": False},
        )
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    users: UserService = Depends(get_user_service),
) -> User | None:
    """
    Resolve the current user from a Supabase JWT.

    Flow:
      1. No Authorization header => anonymous => None.
      2. Decode JWT => 'sub' (provider uid) and 'email'.
      3. Look up the profile; provision a readonly one if missing.

    Raises:
        HTTPException(401): if the token is malformed or lacks claims.
    """
    if credentials is None:
        return None

    payload = decode_access_token(credentials.credentials)
    sub = payload.get("sub")
    email = payload.get("email")

    if not sub or not email:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token missing sub/email",
        )

    metadata = payload.get("user_metadata") or {}
    identity = ProviderIdentity(
        uid=str(sub),
        email=email,
        display_name=metadata.get("display_name") or "",
        photo_url=metadata.get("avatar_url"),
    )
    # Sign-in time is recorded by the session manager, not per request.
    return await users.resolve_or_create(identity, touch_login=False)


def require_auth(user: User | None = Depends(get_current_user)) -> User:
    """
    Raises:
        HTTPException(401): if there is no authenticated user.
    """
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user


def require_role(role: Role) -> Callable[..., User]:
    """
    Dependency factory: the authenticated user must rank at or above `role`
    (readonly < performer < manager < admin).
    """

    def dependency(user: User = Depends(require_auth)) -> User:
        if not has_role(user.role, role):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"{role.capitalize()} access required",
            )
        return user

    return dependency


require_readonly = require_role("readonly")
require_performer = require_role("performer")
require_manager = require_role("manager")
require_admin = require_role(HIGHEST_ROLE)
