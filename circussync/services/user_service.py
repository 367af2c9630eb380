# circussync/services/user_service.py
import logging

from circussync.core.errors import AuthorizationError, NotFoundError
from circussync.core.identity import ProviderIdentity
from circussync.core.roles import DEFAULT_ROLE, HIGHEST_ROLE, Role
from circussync.core.timestamps import utcnow
from circussync.models.user import User
from circussync.repositories.user_repo import UserRepository
from circussync.schemas.user import UserProfileUpdate, UserRoleUpdate
from circussync.services.base_service import Payload

logger = logging.getLogger(__name__)


def default_name_from_email(email: str) -> str:
    """
    Derive a default display name from email if the identity provider
    has none yet.
    """
    if "@" in email:
        return email.split("@", 1)[0]
    return email


class UserService:
    """
    Business logic for User profiles.

    Responsibilities:
      - map a provider identity to a profile, creating it on first sign-in
      - profile edits (name, photo)
      - role changes, allowed for admins only
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def get_user(self, user_id: str) -> User | None:
        return await self.repo.get(user_id)

    async def get_user_or_fail(self, user_id: str) -> User:
        """
        Raises:
            NotFoundError: if not found.
        """
        user = await self.repo.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def list_users(self) -> list[User]:
        return await self.repo.list_all()

    async def resolve_or_create(
        self,
        identity: ProviderIdentity,
        touch_login: bool = True,
    ) -> User:
        """
        Return the profile for a provider identity.

        Existing profiles pick up the provider's email (and display name /
        photo when the profile has none); new profiles start with the
        lowest role.
        """
        user = await self.repo.get(identity.uid)

        if user is None:
            data = {
                "email": identity.email,
                "name": identity.display_name or default_name_from_email(identity.email),
                "photo_url": identity.photo_url,
                "role": DEFAULT_ROLE,
                "last_login": utcnow() if touch_login else None,
            }
            await self.repo.create_with_id(identity.uid, data)
            logger.info("Provisioned profile for %s (%s)", identity.email, identity.uid)
            return await self.get_user_or_fail(identity.uid)

        changes: dict[str, object] = {}
        if identity.email and identity.email != user.email:
            changes["email"] = identity.email
        if identity.display_name and not user.name:
            changes["name"] = identity.display_name
        if identity.photo_url and not user.photo_url:
            changes["photo_url"] = identity.photo_url
        if touch_login:
            changes["last_login"] = utcnow()

        if not changes:
            return user
        await self.repo.update(identity.uid, changes)
        return await self.get_user_or_fail(identity.uid)

    async def update_profile(self, user_id: str, payload: Payload) -> User:
        """
        Partial profile update (name / photo_url).

        Raises:
            NotFoundError: if the profile does not exist.
        """
        if isinstance(payload, UserProfileUpdate):
            update = payload
        else:
            update = UserProfileUpdate.model_validate(payload)
        changes = update.model_dump(exclude_unset=True)

        await self.get_user_or_fail(user_id)
        if changes:
            await self.repo.update(user_id, changes)
        return await self.get_user_or_fail(user_id)

    async def update_role(self, actor: User | None, user_id: str, role: Role) -> User:
        """
        Change a user's role.

        Raises:
            AuthorizationError: if `actor` is not an admin (checked before
                any read or write of the target).
            NotFoundError: if the target does not exist.
        """
        if actor is None or actor.role != HIGHEST_ROLE:
            raise AuthorizationError("Unauthorized: Only administrators can update user roles")

        payload = UserRoleUpdate(role=role)
        await self.get_user_or_fail(user_id)
        await self.repo.update(user_id, {"role": payload.role})
        logger.info("User %s role set to %s by %s", user_id, payload.role, actor.id)
        return await self.get_user_or_fail(user_id)
