# circussync/services/performer_service.py
from datetime import datetime, timezone

from circussync.core.timestamps import ensure_aware
from circussync.models.performer import Availability, AvailabilityStatus, Performer
from circussync.repositories.performer_repo import PerformerRepository
from circussync.schemas.performer import PerformerCreate, PerformerUpdate
from circussync.services.base_service import CrudService


def same_day(a: datetime, b: datetime) -> bool:
    """Calendar-day equality, compared in UTC."""
    return (
        ensure_aware(a).astimezone(timezone.utc).date()
        == ensure_aware(b).astimezone(timezone.utc).date()
    )


class PerformerService(CrudService[Performer]):
    """
    Business logic for Performer.

    Responsibilities:
      - skill lookup (database array-contains on skill category)
      - availability lookup for a date (client-side scan)
      - availability upsert: one entry per calendar day
    """

    noun = "Performer"
    create_schema = PerformerCreate
    update_schema = PerformerUpdate

    def __init__(self, repo: PerformerRepository):
        super().__init__(repo)
        self.repo: PerformerRepository = repo

    async def get_by_skill(self, category: str) -> list[Performer]:
        return await self._logged("get_by_skill", self.repo.list_by_skill_category(category))

    async def get_available_for_date(self, date: datetime) -> list[Performer]:
        """
        Performers free on `date`: no entry for that day, or an entry
        whose status is "available".
        """
        performers = await self.get_all()
        available: list[Performer] = []
        for performer in performers:
            entry = next((a for a in performer.availability if same_day(a.date, date)), None)
            if entry is None or entry.status == "available":
                available.append(performer)
        return available

    async def update_availability(
        self,
        performer_id: str,
        date: datetime,
        status: AvailabilityStatus,
        notes: str | None = None,
    ) -> list[Availability]:
        """
        Upsert the availability entry for one day.

        An existing entry for the same day is replaced in place; otherwise
        a new entry is appended.

        Raises:
            NotFoundError: if the performer does not exist.
        """
        performer = await self.get_or_fail(performer_id)
        availability = list(performer.availability)

        index = next(
            (i for i, a in enumerate(availability) if same_day(a.date, date)),
            None,
        )
        if index is not None:
            current = availability[index]
            availability[index] = Availability(date=current.date, status=status, notes=notes)
        else:
            availability.append(Availability(date=ensure_aware(date), status=status, notes=notes))

        await self.update(
            performer_id,
            {"availability": [a.model_dump() for a in availability]},
        )
        return availability

    @staticmethod
    def filter_by_skill(performers: list[Performer], category: str) -> list[Performer]:
        """Filter an already-fetched list by skill category."""
        return [p for p in performers if any(s.category == category for s in p.skills)]
