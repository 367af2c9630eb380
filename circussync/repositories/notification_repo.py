# circussync/repositories/notification_repo.py
from circussync.database import Filter
from circussync.models.notification import Notification
from circussync.repositories.base import Repository


class NotificationRepository(Repository[Notification]):
    kind = "notifications"
    model = Notification

    async def list_for_user(self, user_id: str, include_read: bool = False) -> list[Notification]:
        filters = [Filter("user_id", "==", user_id)]
        if not include_read:
            filters.append(Filter("read", "==", False))
        return await self.find(*filters, order_by="created_at", descending=True)
