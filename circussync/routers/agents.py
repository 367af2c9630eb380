# circussync/routers/agents.py
from fastapi import APIRouter, Depends, status

from circussync.core.auth import require_manager, require_readonly
from circussync.core.deps import get_agent_service
from circussync.models.agent import Agent
from circussync.schemas.agent import AgentCreate, AgentUpdate
from circussync.services.agent_service import AgentService

router = APIRouter(prefix="/agents", tags=["Agents"])


@router.get(
    "",
    response_model=list[Agent],
    dependencies=[Depends(require_readonly)],
)
async def list_agents(
    specialization: str | None = None,
    service: AgentService = Depends(get_agent_service),
):
    if specialization is not None:
        return await service.get_by_specialization(specialization)
    return await service.get_all()


@router.get(
    "/{agent_id}",
    response_model=Agent,
    dependencies=[Depends(require_readonly)],
)
async def get_agent(agent_id: str, service: AgentService = Depends(get_agent_service)):
    return await service.get_or_fail(agent_id)


@router.post(
    "",
    response_model=Agent,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_manager)],
)
async def create_agent(payload: AgentCreate, service: AgentService = Depends(get_agent_service)):
    agent_id = await service.add(payload)
    return await service.get_or_fail(agent_id)


@router.patch(
    "/{agent_id}",
    response_model=Agent,
    dependencies=[Depends(require_manager)],
)
async def update_agent(
    agent_id: str,
    payload: AgentUpdate,
    service: AgentService = Depends(get_agent_service),
):
    await service.update(agent_id, payload)
    return await service.get_or_fail(agent_id)


@router.delete(
    "/{agent_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_manager)],
)
async def delete_agent(agent_id: str, service: AgentService = Depends(get_agent_service)):
    await service.delete(agent_id)
