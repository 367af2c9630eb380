# circussync/services/agent_service.py
from circussync.models.agent import Agent
from circussync.repositories.agent_repo import AgentRepository
from circussync.schemas.agent import AgentCreate, AgentUpdate
from circussync.services.base_service import CrudService


class AgentService(CrudService[Agent]):
    noun = "Agent"
    create_schema = AgentCreate
    update_schema = AgentUpdate

    def __init__(self, repo: AgentRepository):
        super().__init__(repo)
        self.repo: AgentRepository = repo

    async def get_by_specialization(self, tag: str) -> list[Agent]:
        return await self._logged(
            "get_by_specialization",
            self.repo.list_by_specialization(tag),
        )
