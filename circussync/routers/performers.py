# circussync/routers/performers.py
from datetime import datetime

from fastapi import APIRouter, Depends, status

from circussync.core.auth import require_manager, require_performer, require_readonly
from circussync.core.deps import get_performer_service
from circussync.models.performer import Availability, Performer
from circussync.schemas.performer import AvailabilityUpdate, PerformerCreate, PerformerUpdate
from circussync.services.performer_service import PerformerService

router = APIRouter(prefix="/performers", tags=["Performers"])


@router.get(
    "",
    response_model=list[Performer],
    dependencies=[Depends(require_readonly)],
)
async def list_performers(
    skill: str | None = None,
    available_on: datetime | None = None,
    service: PerformerService = Depends(get_performer_service),
):
    """
    List performers.

    - `skill`: only performers with a skill in that category.
    - `available_on`: only performers not marked unavailable/tentative that day.
    Both filters combine.
    """
    if available_on is not None:
        performers = await service.get_available_for_date(available_on)
        if skill is not None:
            performers = service.filter_by_skill(performers, skill)
        return performers
    if skill is not None:
        return await service.get_by_skill(skill)
    return await service.get_all()


@router.get(
    "/{performer_id}",
    response_model=Performer,
    dependencies=[Depends(require_readonly)],
)
async def get_performer(
    performer_id: str,
    service: PerformerService = Depends(get_performer_service),
):
    return await service.get_or_fail(performer_id)


@router.put(
    "/{performer_id}/availability",
    response_model=list[Availability],
    dependencies=[Depends(require_performer)],
)
async def set_availability(
    performer_id: str,
    payload: AvailabilityUpdate,
    service: PerformerService = Depends(get_performer_service),
):
    """
    Upsert one day's availability. An entry for the same calendar day
    is replaced, otherwise a new one is appended.
    """
    return await service.update_availability(
        performer_id,
        payload.date,
        payload.status,
        payload.notes,
    )


@router.post(
    "",
    response_model=Performer,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_manager)],
)
async def create_performer(
    payload: PerformerCreate,
    service: PerformerService = Depends(get_performer_service),
):
    performer_id = await service.add(payload)
    return await service.get_or_fail(performer_id)


@router.patch(
    "/{performer_id}",
    response_model=Performer,
    dependencies=[Depends(require_manager)],
)
async def update_performer(
    performer_id: str,
    payload: PerformerUpdate,
    service: PerformerService = Depends(get_performer_service),
):
    await service.update(performer_id, payload)
    return await service.get_or_fail(performer_id)


@router.delete(
    "/{performer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_manager)],
)
async def delete_performer(
    performer_id: str,
    service: PerformerService = Depends(get_performer_service),
):
    await service.delete(performer_id)
