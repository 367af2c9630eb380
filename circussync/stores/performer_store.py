# circussync/stores/performer_store.py
from datetime import datetime

from circussync.models.performer import AvailabilityStatus, Performer
from circussync.services.performer_service import PerformerService
from circussync.stores.entity_store import EntityStore


class PerformerStore(EntityStore[Performer]):
    noun = "performer"
    plural = "performers"

    def __init__(self, service: PerformerService):
        super().__init__(service)
        self.service: PerformerService = service

    async def load_by_skill(self, category: str) -> None:
        await self._load_items("Failed to load performers", self.service.get_by_skill(category))

    async def load_available(self, date: datetime) -> None:
        await self._load_items(
            "Failed to load available performers",
            self.service.get_available_for_date(date),
        )

    async def update_availability(
        self,
        performer_id: str,
        date: datetime,
        status: AvailabilityStatus,
        notes: str | None = None,
    ) -> None:
        """Upsert one day of availability and refresh the cached performer."""
        self._begin()
        try:
            await self.service.update_availability(performer_id, date, status, notes)
            performer = await self.service.get_or_fail(performer_id)
        except Exception as exc:
            self._fail("Failed to update availability", exc)
            raise

        state = self.state
        self.patch(
            items=[performer if self._same(p, performer_id) else p for p in state.items],
            selected=performer if self._same(state.selected, performer_id) else state.selected,
            loading=False,
        )
