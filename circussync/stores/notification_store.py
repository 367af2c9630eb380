# circussync/stores/notification_store.py
from circussync.models.notification import Notification
from circussync.services.notification_service import NotificationService
from circussync.stores.entity_store import EntityStore


class NotificationStore(EntityStore[Notification]):
    noun = "notification"
    plural = "notifications"

    def __init__(self, service: NotificationService):
        super().__init__(service)
        self.service: NotificationService = service

    async def load_for_user(self, user_id: str, include_read: bool = False) -> None:
        await self._load_items(
            "Failed to load notifications",
            self.service.get_for_user(user_id, include_read),
        )

    async def mark_as_read(self, notification_id: str) -> None:
        self._begin()
        try:
            await self.service.mark_as_read(notification_id)
        except Exception as exc:
            self._fail("Failed to mark notification as read", exc)
            raise

        state = self.state
        self.patch(
            items=[
                n.model_copy(update={"read": True}) if self._same(n, notification_id) else n
                for n in state.items
            ],
            loading=False,
        )
