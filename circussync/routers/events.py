# circussync/routers/events.py
from datetime import datetime

from fastapi import APIRouter, Depends, Query, status

from circussync.core.auth import require_manager, require_readonly
from circussync.core.deps import get_event_service
from circussync.models.event import Event, EventPerformer, EventStatus
from circussync.schemas.event import EventCreate, EventUpdate
from circussync.services.event_service import UPCOMING_LIMIT, EventService

router = APIRouter(prefix="/events", tags=["Events"])


# -------- Read endpoints --------


@router.get(
    "",
    response_model=list[Event],
    dependencies=[Depends(require_readonly)],
)
async def list_events(
    status_filter: EventStatus | None = Query(default=None, alias="status"),
    client_id: str | None = None,
    performer_id: str | None = None,
    start: datetime | None = None,
    end: datetime | None = None,
    service: EventService = Depends(get_event_service),
):
    """
    List events. At most one filter applies, checked in this order:
    status, client, performer, date range (`start` and `end` together).
    """
    if status_filter is not None:
        return await service.get_by_status(status_filter)
    if client_id is not None:
        return await service.get_by_client(client_id)
    if performer_id is not None:
        return await service.get_by_performer(performer_id)
    if start is not None and end is not None:
        return await service.get_in_date_range(start, end)
    return await service.get_all()


@router.get(
    "/upcoming",
    response_model=list[Event],
    dependencies=[Depends(require_readonly)],
)
async def list_upcoming_events(
    limit: int = UPCOMING_LIMIT,
    service: EventService = Depends(get_event_service),
):
    """Next events from now on, soonest first."""
    return await service.get_upcoming(limit)


@router.get(
    "/{event_id}",
    response_model=Event,
    dependencies=[Depends(require_readonly)],
)
async def get_event(event_id: str, service: EventService = Depends(get_event_service)):
    return await service.get_or_fail(event_id)


@router.get(
    "/{event_id}/performers",
    response_model=list[EventPerformer],
    dependencies=[Depends(require_readonly)],
)
async def get_event_performers(event_id: str, service: EventService = Depends(get_event_service)):
    """
    Lineup of an event in assignment order. Unknown performers come back
    as placeholders with `resolved=false`.
    """
    event = await service.get_or_fail(event_id)
    return await service.resolve_performers(event)


# -------- Manager endpoints --------


@router.post(
    "",
    response_model=Event,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_manager)],
)
async def create_event(payload: EventCreate, service: EventService = Depends(get_event_service)):
    event_id = await service.add(payload)
    return await service.get_or_fail(event_id)


@router.patch(
    "/{event_id}",
    response_model=Event,
    dependencies=[Depends(require_manager)],
)
async def update_event(
    event_id: str,
    payload: EventUpdate,
    service: EventService = Depends(get_event_service),
):
    await service.update(event_id, payload)
    return await service.get_or_fail(event_id)


@router.delete(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_manager)],
)
async def delete_event(event_id: str, service: EventService = Depends(get_event_service)):
    await service.delete(event_id)
