# circussync/services/client_service.py
from datetime import timedelta

from circussync.core.timestamps import utcnow
from circussync.models.client import Client, ClientStatus
from circussync.repositories.client_repo import ClientRepository
from circussync.schemas.client import ClientCreate, ClientUpdate
from circussync.services.base_service import CrudService

# Default look-ahead window for follow-ups
FOLLOW_UP_DAYS = 7


class ClientService(CrudService[Client]):
    """
    Business logic for Client.

    Responsibilities:
      - CRUD via the shared base
      - status and follow-up queries pushed to the database
      - free-text search done client-side (substring match is not
        something the database can index)
    """

    noun = "Client"
    create_schema = ClientCreate
    update_schema = ClientUpdate

    def __init__(self, repo: ClientRepository):
        super().__init__(repo)
        self.repo: ClientRepository = repo

    async def get_by_status(self, status: ClientStatus) -> list[Client]:
        return await self._logged("get_by_status", self.repo.list_by_status(status))

    async def get_for_follow_up(self, days: int = FOLLOW_UP_DAYS) -> list[Client]:
        """Clients whose next follow-up falls between now and `days` from now."""
        start = utcnow()
        end = start + timedelta(days=days)
        return await self._logged(
            "get_for_follow_up",
            self.repo.list_follow_ups_between(start, end),
        )

    async def search(self, term: str) -> list[Client]:
        """
        Case-insensitive substring search over name, contact person and email.
        A blank term returns every client.
        """
        clients = await self.get_all()
        needle = term.strip().lower()
        if not needle:
            return clients
        return [
            c
            for c in clients
            if needle in c.name.lower()
            or needle in c.contact_person.lower()
            or needle in c.email.lower()
        ]
