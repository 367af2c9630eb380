# circussync/repositories/event_repo.py
from datetime import datetime

from circussync.database import Filter
from circussync.models.event import Event
from circussync.repositories.base import Repository


class EventRepository(Repository[Event]):
    """Data access layer for Event."""

    kind = "events"
    model = Event

    async def list_from(self, start: datetime, limit: int) -> list[Event]:
        return await self.find(Filter("date", ">=", start), order_by="date", limit=limit)

    async def list_by_status(self, status: str) -> list[Event]:
        return await self.find(Filter("status", "==", status), order_by="date")

    async def list_by_client(self, client_id: str) -> list[Event]:
        return await self.find(
            Filter("client", "==", client_id),
            order_by="date",
            descending=True,
        )

    async def list_by_performer(self, performer_id: str) -> list[Event]:
        return await self.find(
            Filter("performers", "array_contains", {"performer": performer_id}),
            order_by="date",
            descending=True,
        )

    async def list_between(self, start: datetime, end: datetime) -> list[Event]:
        return await self.find(
            Filter("date", ">=", start),
            Filter("date", "<=", end),
            order_by="date",
        )
