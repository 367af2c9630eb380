# circussync/repositories/task_repo.py
from datetime import datetime

from circussync.database import Filter
from circussync.models.task import Task
from circussync.repositories.base import Repository


class TaskRepository(Repository[Task]):
    """Data access layer for Task."""

    kind = "tasks"
    model = Task

    async def list_for_user(self, user_id: str) -> list[Task]:
        return await self.find(Filter("assigned_to", "==", user_id), order_by="due_date")

    async def list_open_due_between(
        self,
        user_id: str,
        start: datetime,
        end: datetime,
    ) -> list[Task]:
        return await self.find(
            Filter("assigned_to", "==", user_id),
            Filter("due_date", ">=", start),
            Filter("due_date", "<=", end),
            Filter("completed", "==", False),
            order_by="due_date",
        )
