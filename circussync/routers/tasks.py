# circussync/routers/tasks.py
from fastapi import APIRouter, Depends, status

from circussync.core.auth import require_auth, require_manager, require_readonly
from circussync.core.deps import get_task_service
from circussync.models.task import Task
from circussync.models.user import User
from circussync.schemas.task import TaskCreate, TaskUpdate
from circussync.services.task_service import UPCOMING_DAYS, TaskService

router = APIRouter(prefix="/tasks", tags=["Tasks"])


# -------- Own tasks --------


@router.get("/me", response_model=list[Task])
async def list_my_tasks(
    service: TaskService = Depends(get_task_service),
    current_user: User = Depends(require_auth),
):
    """Tasks assigned to the caller, by due date."""
    return await service.get_by_user(current_user.id)


@router.get("/me/upcoming", response_model=list[Task])
async def list_my_upcoming_tasks(
    days: int = UPCOMING_DAYS,
    service: TaskService = Depends(get_task_service),
    current_user: User = Depends(require_auth),
):
    """Open tasks of the caller due within the next `days` days."""
    return await service.get_upcoming(current_user.id, days)


# -------- Shared endpoints --------


@router.get(
    "",
    response_model=list[Task],
    dependencies=[Depends(require_readonly)],
)
async def list_tasks(
    assigned_to: str | None = None,
    service: TaskService = Depends(get_task_service),
):
    if assigned_to is not None:
        return await service.get_by_user(assigned_to)
    return await service.get_all()


@router.get(
    "/{task_id}",
    response_model=Task,
    dependencies=[Depends(require_readonly)],
)
async def get_task(task_id: str, service: TaskService = Depends(get_task_service)):
    return await service.get_or_fail(task_id)


@router.post(
    "",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_manager)],
)
async def create_task(payload: TaskCreate, service: TaskService = Depends(get_task_service)):
    task_id = await service.add(payload)
    return await service.get_or_fail(task_id)


@router.patch(
    "/{task_id}",
    response_model=Task,
    dependencies=[Depends(require_manager)],
)
async def update_task(
    task_id: str,
    payload: TaskUpdate,
    service: TaskService = Depends(get_task_service),
):
    await service.update(task_id, payload)
    return await service.get_or_fail(task_id)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_manager)],
)
async def delete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    await service.delete(task_id)
