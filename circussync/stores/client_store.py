# circussync/stores/client_store.py
from circussync.models.client import Client, ClientStatus
from circussync.services.client_service import FOLLOW_UP_DAYS, ClientService
from circussync.stores.entity_store import EntityStore


class ClientStore(EntityStore[Client]):
    noun = "client"
    plural = "clients"

    def __init__(self, service: ClientService):
        super().__init__(service)
        self.service: ClientService = service

    async def load_by_status(self, status: ClientStatus) -> None:
        await self._load_items("Failed to load clients", self.service.get_by_status(status))

    async def load_follow_ups(self, days: int = FOLLOW_UP_DAYS) -> None:
        await self._load_items(
            "Failed to load follow-up clients",
            self.service.get_for_follow_up(days),
        )

    async def search(self, term: str) -> None:
        await self._load_items("Failed to search clients", self.service.search(term))
