# circussync/stores/agent_store.py
from circussync.models.agent import Agent
from circussync.services.agent_service import AgentService
from circussync.stores.entity_store import EntityStore


class AgentStore(EntityStore[Agent]):
    noun = "agent"
    plural = "agents"

    def __init__(self, service: AgentService):
        super().__init__(service)
        self.service: AgentService = service

    async def load_by_specialization(self, tag: str) -> None:
        await self._load_items("Failed to load agents", self.service.get_by_specialization(tag))
