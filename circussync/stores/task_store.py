# circussync/stores/task_store.py
from circussync.models.task import Task
from circussync.services.task_service import UPCOMING_DAYS, TaskService
from circussync.stores.entity_store import EntityStore


class TaskStore(EntityStore[Task]):
    noun = "task"
    plural = "tasks"

    def __init__(self, service: TaskService):
        super().__init__(service)
        self.service: TaskService = service

    async def load_user_tasks(self, user_id: str) -> None:
        await self._load_items("Failed to load tasks", self.service.get_by_user(user_id))

    async def load_upcoming(self, user_id: str, days: int = UPCOMING_DAYS) -> None:
        await self._load_items(
            "Failed to load upcoming tasks",
            self.service.get_upcoming(user_id, days),
        )
