# circussync/routers/clients.py
from fastapi import APIRouter, Depends, Query, status

from circussync.core.auth import require_manager, require_readonly
from circussync.core.deps import get_client_service
from circussync.models.client import Client, ClientStatus
from circussync.schemas.client import ClientCreate, ClientUpdate
from circussync.services.client_service import FOLLOW_UP_DAYS, ClientService

router = APIRouter(prefix="/clients", tags=["Clients"])


# -------- Read endpoints --------


@router.get(
    "",
    response_model=list[Client],
    dependencies=[Depends(require_readonly)],
)
async def list_clients(
    status_filter: ClientStatus | None = Query(default=None, alias="status"),
    q: str | None = None,
    service: ClientService = Depends(get_client_service),
):
    """
    List clients.

    - `status` narrows to one status (ordered by name).
    - `q` searches name / contact person / email (case-insensitive).
    """
    if status_filter is not None:
        return await service.get_by_status(status_filter)
    if q is not None:
        return await service.search(q)
    return await service.get_all()


@router.get(
    "/follow-ups",
    response_model=list[Client],
    dependencies=[Depends(require_readonly)],
)
async def list_follow_ups(
    days: int = FOLLOW_UP_DAYS,
    service: ClientService = Depends(get_client_service),
):
    """Clients whose next follow-up falls within the next `days` days."""
    return await service.get_for_follow_up(days)


@router.get(
    "/{client_id}",
    response_model=Client,
    dependencies=[Depends(require_readonly)],
)
async def get_client(client_id: str, service: ClientService = Depends(get_client_service)):
    return await service.get_or_fail(client_id)


# -------- Manager endpoints --------


@router.post(
    "",
    response_model=Client,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_manager)],
)
async def create_client(payload: ClientCreate, service: ClientService = Depends(get_client_service)):
    client_id = await service.add(payload)
    return await service.get_or_fail(client_id)


@router.patch(
    "/{client_id}",
    response_model=Client,
    dependencies=[Depends(require_manager)],
)
async def update_client(
    client_id: str,
    payload: ClientUpdate,
    service: ClientService = Depends(get_client_service),
):
    """Partial update; only fields present in the body are written."""
    await service.update(client_id, payload)
    return await service.get_or_fail(client_id)


@router.delete(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_manager)],
)
async def delete_client(client_id: str, service: ClientService = Depends(get_client_service)):
    await service.delete(client_id)
