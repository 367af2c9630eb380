# circussync/repositories/client_repo.py
from datetime import datetime

from circussync.database import Filter
from circussync.models.client import Client
from circussync.repositories.base import Repository


class ClientRepository(Repository[Client]):
    """
    Data access layer for Client.

    - Pure DB operations (CRUD + queries).
    - No business logic.
    """

    kind = "clients"
    model = Client

    async def list_by_status(self, status: str) -> list[Client]:
        return await self.find(Filter("status", "==", status), order_by="name")

    async def list_follow_ups_between(self, start: datetime, end: datetime) -> list[Client]:
        return await self.find(
            Filter("next_follow_up.date", ">=", start),
            Filter("next_follow_up.date", "<=", end),
            order_by="next_follow_up.date",
        )
