# circussync/services/task_service.py
from datetime import timedelta

from circussync.core.timestamps import utcnow
from circussync.models.task import Task
from circussync.repositories.task_repo import TaskRepository
from circussync.schemas.task import TaskCreate, TaskUpdate
from circussync.services.base_service import CrudService

UPCOMING_DAYS = 7


class TaskService(CrudService[Task]):
    """
    Business logic for Task.

    `get_upcoming` only returns open tasks due between now and the
    end of the window.
    """

    noun = "Task"
    create_schema = TaskCreate
    update_schema = TaskUpdate

    def __init__(self, repo: TaskRepository):
        super().__init__(repo)
        self.repo: TaskRepository = repo

    async def get_by_user(self, user_id: str) -> list[Task]:
        return await self._logged("get_by_user", self.repo.list_for_user(user_id))

    async def get_upcoming(self, user_id: str, days: int = UPCOMING_DAYS) -> list[Task]:
        start = utcnow()
        end = start + timedelta(days=days)
        return await self._logged(
            "get_upcoming",
            self.repo.list_open_due_between(user_id, start, end),
        )
