# circussync/repositories/agent_repo.py
from circussync.database import Filter
from circussync.models.agent import Agent
from circussync.repositories.base import Repository


class AgentRepository(Repository[Agent]):
    kind = "agents"
    model = Agent

    async def list_by_specialization(self, tag: str) -> list[Agent]:
        return await self.find(Filter("specialization", "array_contains", tag))
