# circussync/services/notification_service.py
from circussync.models.notification import Notification
from circussync.repositories.notification_repo import NotificationRepository
from circussync.schemas.notification import NotificationCreate, NotificationUpdate
from circussync.services.base_service import CrudService, Payload


class NotificationService(CrudService[Notification]):
    """Business logic for Notification. New notifications always start unread."""

    noun = "Notification"
    create_schema = NotificationCreate
    update_schema = NotificationUpdate

    def __init__(self, repo: NotificationRepository):
        super().__init__(repo)
        self.repo: NotificationRepository = repo

    async def add(self, payload: Payload) -> str:
        incoming = {k: v for k, v in self._as_dict(payload).items() if k != "read"}
        data = {**self._create_data(incoming), "read": False}
        return await self._logged("add", self.repo.add(data))

    async def mark_as_read(self, notification_id: str) -> None:
        """
        Raises:
            NotFoundError: if the notification does not exist.
        """
        await self.update(notification_id, {"read": True})

    async def get_for_user(self, user_id: str, include_read: bool = False) -> list[Notification]:
        """Newest first; unread only unless `include_read`."""
        return await self._logged(
            "get_for_user",
            self.repo.list_for_user(user_id, include_read=include_read),
        )
