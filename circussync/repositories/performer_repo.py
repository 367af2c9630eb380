# circussync/repositories/performer_repo.py
from circussync.database import Filter
from circussync.models.performer import Performer
from circussync.repositories.base import Repository


class PerformerRepository(Repository[Performer]):
    """Data access layer for Performer."""

    kind = "performers"
    model = Performer

    async def list_by_skill_category(self, category: str) -> list[Performer]:
        return await self.find(
            Filter("skills", "array_contains", {"category": category}),
            order_by="name",
        )
