# circussync/repositories/user_repo.py
from typing import Any

from circussync.core.timestamps import encode_for_storage, utcnow
from circussync.database import Filter
from circussync.models.user import User
from circussync.repositories.base import Repository


class UserRepository(Repository[User]):
    """
    Data access layer for User.

    Users are keyed by the identity provider uid instead of a
    database-assigned id, so creation goes through `create_with_id`.
    """

    kind = "users"
    model = User

    async def create_with_id(self, user_id: str, data: dict[str, Any]) -> None:
        """Insert a profile under the provider uid."""
        now = utcnow()
        body = {**self._strip_server_fields(data), "created_at": now, "updated_at": now}
        await self.db.set(self.kind, user_id, encode_for_storage(body))

    async def get_by_email(self, email: str) -> User | None:
        """Return a User by email, or None if not found."""
        users = await self.find(Filter("email", "==", email), limit=1)
        return users[0] if users else None
