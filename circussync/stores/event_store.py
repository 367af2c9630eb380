# circussync/stores/event_store.py
"""
Event store.

Besides the usual list/selection state it caches the resolved lineup of
the selected event in `event_performers`. The cache is refreshed whenever
the selected event is loaded, added, updated or deleted, and emptied when
the selection is cleared.
"""

import logging

from circussync.models.event import Event, EventPerformer, EventStatus
from circussync.services.event_service import UPCOMING_LIMIT, EventService
from circussync.stores.entity_store import EntityState, EntityStore

logger = logging.getLogger(__name__)


class EventState(EntityState):
    event_performers: list[EventPerformer] = []


class EventStore(EntityStore[Event]):
    noun = "event"
    plural = "events"
    state_class = EventState

    def __init__(self, service: EventService):
        super().__init__(service)
        self.service: EventService = service

    async def _on_selected(self, record: Event | None) -> None:
        if record is None:
            self.patch(event_performers=[])
            return
        self.patch(event_performers=await self.service.resolve_performers(record))

    def _on_cleared(self) -> None:
        self.patch(event_performers=[])

    async def load_performers_for_event(self, event: Event) -> None:
        """Resolve the lineup of `event` without changing the selection."""
        self._begin()
        try:
            performers = await self.service.resolve_performers(event)
        except Exception as exc:
            self._fail("Failed to load event performers", exc)
            return
        self.patch(event_performers=performers, loading=False)

    async def load_upcoming(self, limit: int = UPCOMING_LIMIT) -> None:
        await self._load_items("Failed to load upcoming events", self.service.get_upcoming(limit))

    async def load_by_status(self, status: EventStatus) -> None:
        await self._load_items("Failed to load events", self.service.get_by_status(status))

    async def load_client_events(self, client_id: str) -> None:
        await self._load_items("Failed to load client events", self.service.get_by_client(client_id))

    async def load_performer_events(self, performer_id: str) -> None:
        await self._load_items(
            "Failed to load performer events",
            self.service.get_by_performer(performer_id),
        )
