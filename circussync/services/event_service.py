# circussync/services/event_service.py
from datetime import datetime

from circussync.core.errors import CircusSyncError
from circussync.core.timestamps import utcnow
from circussync.models.event import Event, EventPerformer, EventStatus
from circussync.models.performer import placeholder_performer
from circussync.repositories.event_repo import EventRepository
from circussync.repositories.performer_repo import PerformerRepository
from circussync.schemas.event import EventCreate, EventUpdate
from circussync.services.base_service import CrudService

UPCOMING_LIMIT = 10


class EventService(CrudService[Event]):
    """
    Business logic for Event.

    Responsibilities:
      - date / status / client / performer queries
      - resolving an event's performer assignments into Performer records
        (the only cross-entity join in the system)
    """

    noun = "Event"
    create_schema = EventCreate
    update_schema = EventUpdate

    def __init__(self, repo: EventRepository, performer_repo: PerformerRepository):
        super().__init__(repo)
        self.repo: EventRepository = repo
        self.performer_repo = performer_repo

    async def get_upcoming(self, limit: int = UPCOMING_LIMIT) -> list[Event]:
        return await self._logged("get_upcoming", self.repo.list_from(utcnow(), limit))

    async def get_by_status(self, status: EventStatus) -> list[Event]:
        return await self._logged("get_by_status", self.repo.list_by_status(status))

    async def get_by_client(self, client_id: str) -> list[Event]:
        """Events for a client, newest first."""
        return await self._logged("get_by_client", self.repo.list_by_client(client_id))

    async def get_by_performer(self, performer_id: str) -> list[Event]:
        """Events a performer is assigned to, newest first."""
        return await self._logged("get_by_performer", self.repo.list_by_performer(performer_id))

    async def get_in_date_range(self, start: datetime, end: datetime) -> list[Event]:
        return await self._logged("get_in_date_range", self.repo.list_between(start, end))

    async def resolve_performers(self, event: Event) -> list[EventPerformer]:
        """
        Join assignments against Performer records, keeping assignment order.

        A performer that does not exist, or whose lookup fails, is replaced by
        a placeholder so one bad reference never hides the rest of the lineup.
        """
        resolved: list[EventPerformer] = []
        for assignment in event.performers:
            try:
                performer = await self.performer_repo.get(assignment.performer)
            except CircusSyncError as exc:
                self.logger.warning(
                    "Could not fetch performer %s for event %s: %s",
                    assignment.performer,
                    event.id,
                    exc.message,
                )
                performer = None

            if performer is None:
                resolved.append(
                    EventPerformer(
                        assignment=assignment,
                        performer=placeholder_performer(assignment.performer),
                        resolved=False,
                    )
                )
            else:
                resolved.append(EventPerformer(assignment=assignment, performer=performer))
        return resolved
